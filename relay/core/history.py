"""Stateless history handling.

The frontend stores the conversation and sends it with every request. Only
the most recent turns are forwarded upstream; nothing is kept server-side.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from relay.models import ChatTurn


MAX_HISTORY_TURNS = 10


def recent_turns(history: Sequence[ChatTurn], limit: int = MAX_HISTORY_TURNS) -> List[ChatTurn]:
    if limit <= 0:
        return []
    return list(history or [])[-limit:]


def to_gemini_role(role: str) -> str:
    # Gemini only knows "user" and "model"
    return "user" if role == "user" else "model"


def to_gemini_contents(history: Sequence[ChatTurn], message: str) -> List[Dict]:
    contents: List[Dict] = []
    for turn in recent_turns(history):
        contents.append(
            {
                "role": to_gemini_role(turn.role),
                "parts": [{"text": turn.content}],
            }
        )
    contents.append({"role": "user", "parts": [{"text": message}]})
    return contents
