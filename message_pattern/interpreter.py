"""Apply a message pattern to a message.

Characters in the pattern are evaluated as follows:

- ``!`` (DELETE_REMAINDER): all remaining message characters are dropped
- ``#`` (DELETE): the next message character is dropped
- ``_`` (PLACEHOLDER): the next message character is copied to the result
- ``\\`` (ESCAPE): the next pattern character is copied to the result
- anything else: the pattern character itself is copied to the result

ESCAPE is only needed to put one of the control characters into the result.
Once the pattern is exhausted, whatever is left of the message is appended.

If a character expected by the pattern is missing (from the message for a
PLACEHOLDER, from the pattern for an ESCAPE) a question mark is substituted.
A DELETE with nothing left to delete does nothing.
"""

from __future__ import annotations

from collections import deque
import logging

from .const import (
    ACTION_DELETE,
    ACTION_DELETE_REMAINDER,
    ACTION_PLACEHOLDER,
    ESCAPE,
    QUESTION_MARK,
)
from .unicode_units import UnicodeUnit, segment

_LOGGER = logging.getLogger(__name__)


def apply_message_pattern(message: str | None, pattern: str | None) -> str | None:
    """Format a message using a message pattern.

    Surrogate pairs in either string are handled as single characters.

    Args:
        message: The original message.
        pattern: The pattern to apply to the message.

    Returns:
        The formatted message, or the message as-is if either the message
        or the pattern is None or empty.
    """
    if not pattern or not message:
        return message

    msg_units = segment(message)
    pattern_units = segment(pattern)
    _LOGGER.debug(
        "Applying pattern of %d units to message of %d units",
        len(pattern_units),
        len(msg_units),
    )

    result: list[str] = []

    while pattern_units:
        unit = pattern_units.popleft().chars

        if unit == ESCAPE:
            _poll(pattern_units, result)
        elif unit == ACTION_PLACEHOLDER:
            _poll(msg_units, result)
        elif unit == ACTION_DELETE:
            if msg_units:
                msg_units.popleft()
        elif unit == ACTION_DELETE_REMAINDER:
            msg_units.clear()
        else:
            result.append(unit)

    # Copy what's left of the message
    if msg_units:
        _LOGGER.debug("Appending %d leftover message units", len(msg_units))
    result.extend(msg_unit.chars for msg_unit in msg_units)

    return "".join(result)


def _poll(units: deque[UnicodeUnit], result: list[str]) -> None:
    """Move the next unit to the result, or a question mark if there is none."""
    result.append(units.popleft().chars if units else QUESTION_MARK)
