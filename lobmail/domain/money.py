from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from functools import total_ordering
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


@total_ordering
class Money:
    """A non-negative USD amount stored as an integer count of cents.

    On the wire an amount is a JSON number whose text is ``"dollars.cents"``.
    ``Money.from_float`` multiplies by 100 and truncates toward zero, so
    ``Money.from_float(10.005)`` is ``10.00``; use ``from_float_rounded`` when
    half-up rounding is wanted instead.
    """

    __slots__ = ("_minor_units",)

    def __init__(self, minor_units: int) -> None:
        if isinstance(minor_units, bool) or not isinstance(minor_units, int):
            raise TypeError(f"Money expects an integer count of cents, got {type(minor_units).__name__}")
        if minor_units < 0:
            raise ValueError(f"Money cannot be negative: {minor_units}")
        self._minor_units = minor_units

    @classmethod
    def from_major_minor(cls, major: int, minor: int) -> Money:
        return cls(major * 100 + minor)

    @classmethod
    def from_float(cls, amount: float) -> Money:
        return cls(int(amount * 100))

    @classmethod
    def from_float_rounded(cls, amount: float) -> Money:
        cents = (Decimal(repr(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return cls(int(cents))

    @classmethod
    def parse(cls, text: str) -> Money:
        parts = text.split(".")
        if len(parts) > 2:
            raise ValueError(f"Unable to parse {text} as money")
        major = parts[0]
        minor = parts[1] if len(parts) == 2 else "0"
        if not major.isdigit() or not minor.isdigit() or len(minor) > 2:
            raise ValueError(f"Unable to parse {text} as money")
        # "10.5" is ten dollars fifty
        if len(minor) == 1:
            minor += "0"
        return cls.from_major_minor(int(major), int(minor))

    @property
    def minor_units(self) -> int:
        return self._minor_units

    def to_major_minor(self) -> tuple[int, int]:
        return divmod(self._minor_units, 100)

    def to_text(self) -> str:
        major, minor = self.to_major_minor()
        return f"{major}.{minor:02d}"

    def to_decimal(self) -> Decimal:
        return Decimal(self.to_text())

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Money({self.to_text()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._minor_units == other._minor_units

    def __lt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._minor_units < other._minor_units

    def __hash__(self) -> int:
        return hash(self._minor_units)

    @classmethod
    def _validate(cls, value: Any) -> Money:
        if isinstance(value, Money):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unable to parse {value!r} as money")
        if isinstance(value, float):
            return cls.parse(repr(value))
        if isinstance(value, (int, Decimal, str)):
            return cls.parse(str(value))
        raise ValueError(f"Unable to parse {value!r} as money")

    def _serialize(self) -> float:
        # Two-decimal amounts survive the float repr unchanged.
        return float(self.to_text())

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize,
                when_used="json",
            ),
        )
