"""Constants for message pattern formatting."""

# Pattern control characters
ESCAPE = "\\"
ACTION_PLACEHOLDER = "_"
ACTION_DELETE = "#"
ACTION_DELETE_REMAINDER = "!"

# Short aliases
PLACEHOLDER = ACTION_PLACEHOLDER
DELETE = ACTION_DELETE
DELETE_REMAINDER = ACTION_DELETE_REMAINDER

CONTROL_CHARS: frozenset[str] = frozenset(
    {ESCAPE, ACTION_PLACEHOLDER, ACTION_DELETE, ACTION_DELETE_REMAINDER}
)

# Substituted when the message or pattern runs out of characters
QUESTION_MARK = "?"

# UTF-16 surrogate ranges
HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF

# Configuration keys
CONF_PATTERN = "pattern"
CONF_ENABLED = "enabled"

# Default values
DEFAULT_PATTERN = ""
DEFAULT_ENABLED = True
