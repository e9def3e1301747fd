"""Configuration for message pattern formatting."""

from __future__ import annotations

from dataclasses import asdict, dataclass
import logging
from typing import Any

import voluptuous as vol

from .const import CONF_ENABLED, CONF_PATTERN, DEFAULT_ENABLED, DEFAULT_PATTERN
from .helpers import PatternSummary, describe_pattern
from .interpreter import apply_message_pattern

_LOGGER = logging.getLogger(__name__)


def _pattern_string(value: Any) -> str:
    """Validate a pattern value; None means no pattern."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise vol.Invalid(f"expected a string pattern, got {type(value).__name__}")
    return value


MESSAGE_PATTERN_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_PATTERN, default=DEFAULT_PATTERN): _pattern_string,
        vol.Optional(CONF_ENABLED, default=DEFAULT_ENABLED): vol.Boolean(),
    }
)


@dataclass
class MessagePatternConfig:
    """Message pattern settings."""

    pattern: str = DEFAULT_PATTERN
    enabled: bool = DEFAULT_ENABLED

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> MessagePatternConfig:
        """Build a config from a raw dict, validating it first.

        Raises:
            vol.Invalid: If the dict has unknown keys or values of the wrong type.
        """
        validated = MESSAGE_PATTERN_SCHEMA(dict(data or {}))
        return cls(pattern=validated[CONF_PATTERN], enabled=validated[CONF_ENABLED])

    def as_dict(self) -> dict[str, Any]:
        """Return the config as a plain dict."""
        return asdict(self)

    def apply(self, message: str | None) -> str | None:
        """Apply the configured pattern to a message."""
        if not self.enabled:
            _LOGGER.debug("Message pattern disabled; returning message unchanged")
            return message
        return apply_message_pattern(message, self.pattern)

    def summary(self) -> PatternSummary:
        """Describe the configured pattern."""
        return describe_pattern(self.pattern)
