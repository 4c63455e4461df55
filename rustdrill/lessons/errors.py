"""Error handling: name tags, purchase costs and positive integers."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, as strictly as a compiler's parser."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > (1 << (bits - 1)) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return name tag text, refusing an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost in tokens of the typed quantity of items, fee included."""
    quantity = _parse_int(item_quantity, 32)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    if not -(1 << 31) <= cost <= (1 << 31) - 1:
        raise OverflowError("attempt to multiply with overflow")
    return cost


class CreationErrorKind(enum.Enum):
    """Why a value is not a positive non-zero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A PositiveNonzeroInteger could not be created."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not be turned into a PositiveNonzeroInteger."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @property
    def creation(self) -> CreationError | None:
        """The creation error, if the number was parsed but not positive."""
        return self.cause if isinstance(self.cause, CreationError) else None

    @property
    def parse_int(self) -> ValueError | None:
        """The parse error, if the text was not an integer."""
        return None if isinstance(self.cause, CreationError) else self.cause


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text as a positive non-zero 64-bit integer."""
    try:
        value = _parse_int(s, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err