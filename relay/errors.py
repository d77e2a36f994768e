from __future__ import annotations

from typing import Optional


class RelayError(Exception):
    """Base class for failures raised while relaying a chat message."""

    status_code = 500


class InvalidRequestError(RelayError):
    status_code = 400


class MethodNotAllowedError(RelayError):
    status_code = 405

    def __init__(self, method: str) -> None:
        super().__init__(f"Method {method} not allowed")
        self.method = method


class UpstreamError(RelayError):
    """The generation API could not be reached or answered with an error status."""

    def __init__(self, message: str, upstream_status: Optional[int] = None) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status
