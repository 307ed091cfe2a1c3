from __future__ import annotations

from typing import Any, Literal


ErrorKind = Literal["api", "transport", "serialization", "bad_request"]
ErrorCategory = Literal["transient", "terminal"]


class LobError(Exception):
    """Base exception for every failure surfaced by the Lob client."""

    kind: ErrorKind
    status_code: int | None = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def retryable(self) -> bool:
        return False

    @property
    def category(self) -> ErrorCategory:
        return "transient" if self.retryable else "terminal"


class LobApiError(LobError):
    """Structured error payload returned by the Lob API."""

    kind = "api"

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        return f"Lob error - status_code: {self.status_code}, message: {self.message}"

    @property
    def retryable(self) -> bool:
        return not 400 <= self.status_code < 500


class LobTransportError(LobError):
    """Network or protocol failure before or during the exchange."""

    kind = "transport"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        return f"Lob connectivity error - {self.message}"

    @property
    def retryable(self) -> bool:
        return self.status_code != 400


class LobSerializationError(LobError):
    """Local encode/decode failure, including query-string encoding."""

    kind = "serialization"

    def __str__(self) -> str:
        return f"Lob serialization error - {self.message}"


class LobBadRequest(LobError):
    """Request rejected locally, before any network call."""

    kind = "bad_request"

    def __str__(self) -> str:
        return f"Lob bad request - {self.message}"


def error_detail(*, operation: str, exc: LobError, provider: str = "lob") -> dict[str, Any]:
    return {
        "type": "provider_error",
        "provider": provider,
        "operation": operation,
        "kind": exc.kind,
        "category": exc.category,
        "retryable": exc.retryable,
        "status_code": exc.status_code,
        "message": str(exc),
    }
