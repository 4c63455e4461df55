"""Validated rectangles and copy-on-write absolute values."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with positive width and height."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Absolute values; the input itself is returned when nothing needs changing."""
    if all(value >= 0 for value in values):
        return values
    return [abs(value) for value in values]