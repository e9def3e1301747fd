"""Segmentation of text into Unicode units.

A Python ``str`` is a sequence of code points, so characters outside the
Basic Multilingual Plane are normally a single element already. Text built
from UTF-16 code units (or decoded with ``surrogatepass``) can still hold a
high/low surrogate pair as two separate code points. Such a pair is merged
into one unit here so that pattern formatting never splits it.

Lone surrogates are kept as single units rather than rejected, which means
joining the units of any string gives back that exact string.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
import logging

from .const import (
    HIGH_SURROGATE_END,
    HIGH_SURROGATE_START,
    LOW_SURROGATE_END,
    LOW_SURROGATE_START,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnicodeUnit:
    """One character, or one high/low surrogate pair stored together."""

    chars: str

    @property
    def first(self) -> str:
        """Return the first character of the unit."""
        return self.chars[0]

    @property
    def is_pair(self) -> bool:
        """Return True if the unit holds a surrogate pair."""
        return len(self.chars) == 2

    def __str__(self) -> str:
        return self.chars


def is_high_surrogate(char: str) -> bool:
    """Return True if char is a UTF-16 high (leading) surrogate."""
    return HIGH_SURROGATE_START <= ord(char) <= HIGH_SURROGATE_END


def is_low_surrogate(char: str) -> bool:
    """Return True if char is a UTF-16 low (trailing) surrogate."""
    return LOW_SURROGATE_START <= ord(char) <= LOW_SURROGATE_END


def segment(text: str) -> deque[UnicodeUnit]:
    """Split text into a queue of Unicode units.

    Args:
        text: Text to split. May be empty or contain lone surrogates.

    Returns:
        Units in their original order, ready to be consumed from the left.
    """
    units: deque[UnicodeUnit] = deque()
    i = 0
    while i < len(text):
        high = text[i]
        if is_high_surrogate(high) and i + 1 < len(text) and is_low_surrogate(text[i + 1]):
            pair = high + text[i + 1]
            _LOGGER.debug("Surrogate pair at index %d: U+%04X U+%04X", i, ord(pair[0]), ord(pair[1]))
            units.append(UnicodeUnit(pair))
            i += 2
            continue
        units.append(UnicodeUnit(high))
        i += 1
    return units


def join_units(units: Iterable[UnicodeUnit]) -> str:
    """Concatenate units back into a string."""
    return "".join(unit.chars for unit in units)
