"""Field-level encodings for the Lob wire format.

Lob's verification endpoints report "no value" as an empty string instead of
``null`` and a handful of USPS flags as ``"Y"`` / ``"N"`` / ``""``. The aliases
below plug those conventions into pydantic so models can declare plain
``Optional`` types:

    secondary_line: EmptyStrOptional[str]
    dpv_vacant: YesNo

List filters are sent as nested-bracket query strings
(``metadata[key]=value``, ``include[]=total_count``) because the API does not
accept JSON-encoded query parameters.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator, PlainSerializer, PlainValidator, WrapSerializer

from lobmail.domain.errors import LobSerializationError


T = TypeVar("T")

_YES_NO_DECODE = {"Y": True, "N": False, "": None}


def decode_empty_optional(value: Any) -> Any:
    if value == "":
        return None
    return value


def encode_empty_optional(value: Any) -> Any:
    if value is None:
        return ""
    return value


def decode_yes_no(value: Any) -> bool | None:
    if isinstance(value, str) and value in _YES_NO_DECODE:
        return _YES_NO_DECODE[value]
    raise ValueError(f"Expected 'Y', 'N', or '', found {value!r}")


def encode_yes_no(value: bool | None) -> str:
    if value is None:
        return ""
    return "Y" if value else "N"


def _serialize_empty_optional(value: Any, handler) -> Any:
    if value is None:
        return ""
    return handler(value)


EmptyStrOptional = Annotated[
    Optional[T],
    BeforeValidator(decode_empty_optional),
    WrapSerializer(_serialize_empty_optional),
]

YesNo = Annotated[
    Optional[bool],
    PlainValidator(decode_yes_no),
    PlainSerializer(encode_yes_no, return_type=str),
]


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _flatten(prefix: str, value: Any, out: list[tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, dict):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]" if prefix else str(key), item, out)
        return
    if isinstance(value, (list, tuple)):
        for item in value:
            if isinstance(item, (dict, list, tuple)):
                raise LobSerializationError(f"Cannot encode nested collection inside list field {prefix!r}")
            if item is not None:
                out.append((f"{prefix}[]", _scalar_text(item)))
        return
    if not prefix:
        raise LobSerializationError(f"Cannot encode top-level scalar {value!r} as a query string")
    out.append((prefix, _scalar_text(value)))


def encode_query(value: BaseModel | dict[str, Any] | None) -> list[tuple[str, str]]:
    """Encode options as ordered ``(key, value)`` pairs using bracket nesting."""
    if value is None:
        return []
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", exclude_none=True)
    if not isinstance(value, dict):
        raise LobSerializationError(f"Cannot encode {type(value).__name__} as a query string")
    pairs: list[tuple[str, str]] = []
    _flatten("", value, pairs)
    return pairs


def encode_form(value: dict[str, Any]) -> list[tuple[str, str]]:
    # Multipart text fields use the same bracket nesting as query strings.
    return encode_query(value)
