from relay.core.history import MAX_HISTORY_TURNS, recent_turns, to_gemini_contents, to_gemini_role
from relay.models import ChatTurn


def _turns(n):
    return [
        ChatTurn(role="user" if i % 2 == 0 else "assistant", content=f"turn {i + 1}")
        for i in range(n)
    ]


def test_role_mapping():
    assert to_gemini_role("user") == "user"
    assert to_gemini_role("assistant") == "model"
    assert to_gemini_role("bot") == "model"
    assert to_gemini_role("USER") == "model"


def test_contents_without_history():
    assert to_gemini_contents([], "hi") == [{"role": "user", "parts": [{"text": "hi"}]}]


def test_contents_keep_order_and_end_with_message():
    history = _turns(4)
    contents = to_gemini_contents(history, "What does Azizul research?")

    assert len(contents) == len(history) + 1
    assert [c["parts"][0]["text"] for c in contents[:-1]] == ["turn 1", "turn 2", "turn 3", "turn 4"]
    assert [c["role"] for c in contents[:-1]] == ["user", "model", "user", "model"]
    assert contents[-1] == {"role": "user", "parts": [{"text": "What does Azizul research?"}]}


def test_long_history_keeps_most_recent_window():
    contents = to_gemini_contents(_turns(12), "next")

    assert len(contents) == MAX_HISTORY_TURNS + 1
    assert contents[0]["parts"][0]["text"] == "turn 3"
    assert contents[-2]["parts"][0]["text"] == "turn 12"
    assert contents[-1]["parts"][0]["text"] == "next"


def test_recent_turns_limits():
    history = _turns(3)
    assert recent_turns(history) == history
    assert recent_turns(history, limit=2) == history[1:]
    assert recent_turns(history, limit=0) == []
