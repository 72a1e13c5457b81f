"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from typing import Self

_DIGITS = re.compile(r"[0-9]+")
# Twenty significant digits already exceed any 64-bit primary key.
_MAX_SIGNIFICANT_DIGITS = 20


@dataclass(frozen=True)
class HotelId:
    """Unique identifier for a Hotel."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("HotelId cannot be negative")

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not _DIGITS.fullmatch(value):
            raise ValueError(f"HotelId must be made of digits only: {value!r}")
        digits = value.lstrip("0") or "0"
        return cls(value=int(digits[:_MAX_SIGNIFICANT_DIGITS]))


@dataclass(frozen=True)
class UserId:
    """Identity of an authenticated user."""

    value: int


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
