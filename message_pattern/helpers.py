"""Helpers for writing and inspecting message patterns."""

from __future__ import annotations

from dataclasses import dataclass

from .const import (
    ACTION_DELETE,
    ACTION_DELETE_REMAINDER,
    ACTION_PLACEHOLDER,
    CONTROL_CHARS,
    ESCAPE,
)
from .unicode_units import segment


@dataclass(frozen=True)
class PatternSummary:
    """What a pattern does, independent of any message."""

    placeholders: int = 0
    deletes: int = 0
    deletes_remainder: bool = False
    literals: int = 0
    dangling_escape: bool = False

    @property
    def consumed_units(self) -> int:
        """Number of message units taken from the front of the message."""
        return self.placeholders + self.deletes


def escape_pattern_text(text: str) -> str:
    """Escape control characters so text can be used literally in a pattern.

    Args:
        text: Text to be emitted as-is by a pattern.

    Returns:
        Text with an ESCAPE in front of every control character.
    """
    result: list[str] = []
    for unit in segment(text):
        if unit.chars in CONTROL_CHARS:
            result.append(ESCAPE)
        result.append(unit.chars)
    return "".join(result)


def describe_pattern(pattern: str | None) -> PatternSummary:
    """Summarize the actions a pattern will perform.

    The pattern is walked the same way apply_message_pattern walks it, so an
    ESCAPE always consumes the unit that follows it.

    Args:
        pattern: Pattern to inspect.

    Returns:
        Counts of placeholders, deletes and literal units in the pattern.
    """
    if not pattern:
        return PatternSummary()

    placeholders = 0
    deletes = 0
    literals = 0
    deletes_remainder = False
    dangling_escape = False

    units = segment(pattern)
    while units:
        unit = units.popleft().chars
        if unit == ESCAPE:
            if units:
                units.popleft()
                literals += 1
            else:
                dangling_escape = True
        elif unit == ACTION_PLACEHOLDER:
            placeholders += 1
        elif unit == ACTION_DELETE:
            deletes += 1
        elif unit == ACTION_DELETE_REMAINDER:
            deletes_remainder = True
        else:
            literals += 1

    return PatternSummary(
        placeholders=placeholders,
        deletes=deletes,
        deletes_remainder=deletes_remainder,
        literals=literals,
        dangling_escape=dangling_escape,
    )
