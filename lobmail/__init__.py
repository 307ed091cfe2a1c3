from lobmail.client import LobClient
from lobmail.config import API_VERSION, LOB_API_BASE, Settings, get_settings
from lobmail.domain.errors import (
    LobApiError,
    LobBadRequest,
    LobError,
    LobSerializationError,
    LobTransportError,
)
from lobmail.domain.money import Money
from lobmail.models.events import parse_event

__all__ = [
    "API_VERSION",
    "LOB_API_BASE",
    "LobApiError",
    "LobBadRequest",
    "LobClient",
    "LobError",
    "LobSerializationError",
    "LobTransportError",
    "Money",
    "Settings",
    "get_settings",
    "parse_event",
]
