"""Tests for message pattern configuration."""

import pytest
import voluptuous as vol

from message_pattern.config import MESSAGE_PATTERN_SCHEMA, MessagePatternConfig
from message_pattern.const import CONF_ENABLED, CONF_PATTERN


class TestSchema:
    """Tests for MESSAGE_PATTERN_SCHEMA."""

    def test_defaults(self) -> None:
        assert MESSAGE_PATTERN_SCHEMA({}) == {CONF_PATTERN: "", CONF_ENABLED: True}

    def test_none_pattern_becomes_empty(self) -> None:
        assert MESSAGE_PATTERN_SCHEMA({CONF_PATTERN: None})[CONF_PATTERN] == ""

    def test_pattern_content_not_validated(self) -> None:
        data = MESSAGE_PATTERN_SCHEMA({CONF_PATTERN: "\\"})
        assert data[CONF_PATTERN] == "\\"

    def test_non_string_pattern_rejected(self) -> None:
        with pytest.raises(vol.Invalid):
            MESSAGE_PATTERN_SCHEMA({CONF_PATTERN: 123})

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(vol.MultipleInvalid):
            MESSAGE_PATTERN_SCHEMA({"format": "___"})

    def test_enabled_coerced(self) -> None:
        assert MESSAGE_PATTERN_SCHEMA({CONF_ENABLED: "off"})[CONF_ENABLED] is False


class TestMessagePatternConfig:
    """Tests for MessagePatternConfig."""

    def test_from_dict(self) -> None:
        cfg = MessagePatternConfig.from_dict({CONF_PATTERN: "_-_"})
        assert cfg == MessagePatternConfig(pattern="_-_", enabled=True)

    def test_from_none(self) -> None:
        assert MessagePatternConfig.from_dict(None) == MessagePatternConfig()

    def test_from_dict_invalid(self) -> None:
        with pytest.raises(vol.Invalid):
            MessagePatternConfig.from_dict({CONF_ENABLED: "maybe"})

    def test_as_dict_round_trips(self) -> None:
        cfg = MessagePatternConfig(pattern="#_", enabled=False)
        assert MessagePatternConfig.from_dict(cfg.as_dict()) == cfg

    def test_apply(self) -> None:
        cfg = MessagePatternConfig.from_dict({CONF_PATTERN: "_-_"})
        assert cfg.apply("AB") == "A-B"

    def test_apply_disabled(self) -> None:
        cfg = MessagePatternConfig(pattern="_-_", enabled=False)
        assert cfg.apply("AB") == "AB"

    def test_apply_without_pattern(self) -> None:
        assert MessagePatternConfig().apply("AB") == "AB"
        assert MessagePatternConfig().apply(None) is None

    def test_summary(self) -> None:
        cfg = MessagePatternConfig(pattern="__#!")
        summary = cfg.summary()
        assert summary.placeholders == 2
        assert summary.deletes == 1
        assert summary.deletes_remainder
