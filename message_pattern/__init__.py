"""Message pattern formatting.

This package formats a message (for example the human-readable text of a
barcode) by walking a pattern that copies, drops, or inserts characters.
Surrogate pairs are treated as single characters throughout.

Pattern characters:
-------------------
- ``_`` copies the next message character
- ``#`` drops the next message character
- ``!`` drops the rest of the message
- ``\\`` copies the next pattern character literally
- anything else is copied as-is

Whatever is left of the message after the pattern is appended to the
result. A ``?`` is substituted when a ``_`` or ``\\`` finds nothing to copy.
"""

from __future__ import annotations

from .config import MESSAGE_PATTERN_SCHEMA, MessagePatternConfig
from .const import (
    ACTION_DELETE,
    ACTION_DELETE_REMAINDER,
    ACTION_PLACEHOLDER,
    CONTROL_CHARS,
    DELETE,
    DELETE_REMAINDER,
    ESCAPE,
    PLACEHOLDER,
    QUESTION_MARK,
)
from .helpers import PatternSummary, describe_pattern, escape_pattern_text
from .interpreter import apply_message_pattern
from .unicode_units import (
    UnicodeUnit,
    is_high_surrogate,
    is_low_surrogate,
    join_units,
    segment,
)

__all__ = [
    "ACTION_DELETE",
    "ACTION_DELETE_REMAINDER",
    "ACTION_PLACEHOLDER",
    "CONTROL_CHARS",
    "DELETE",
    "DELETE_REMAINDER",
    "ESCAPE",
    "MESSAGE_PATTERN_SCHEMA",
    "PLACEHOLDER",
    "QUESTION_MARK",
    "MessagePatternConfig",
    "PatternSummary",
    "UnicodeUnit",
    "apply_message_pattern",
    "describe_pattern",
    "escape_pattern_text",
    "is_high_surrogate",
    "is_low_surrogate",
    "join_units",
    "segment",
]
