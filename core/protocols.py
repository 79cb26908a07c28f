"""Shared protocol definitions."""

from typing import Any, Protocol


class RequestLogger(Protocol):
    """Protocol for request logging (console)."""

    def log_relay(
        self,
        model: str,
        body: dict[str, Any],
        credential: Any,
        *,
        path: str,
    ) -> None: ...
    def log_error(self, route: str, status: int, message: str) -> None: ...
