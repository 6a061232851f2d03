"""Dispatcher, label resolution and settings.

Tests:
    - numeric/string/of build the right clause without validating
    - Explicit labels win; otherwise the call-site expression is captured
    - Capture falls back to the default label when ambiguous or disabled
    - GUARDR_* environment settings feed the default guard
"""
import re

import pytest

from guardr import (
    BoundsViolation,
    Guard,
    GuardConfig,
    NumericGuard,
    Settings,
    ShapeViolation,
    StringGuard,
    capture_label,
    default_guard,
    of,
)


class TestDispatch:

    def test_construction_never_validates(self, guard):
        assert isinstance(guard.numeric(-1, "x"), NumericGuard)
        assert isinstance(guard.string(None, "x"), StringGuard)

    @pytest.mark.parametrize("value", ["text", "", None])
    def test_of_routes_strings_and_none(self, guard, value):
        assert isinstance(guard.of(value, "x"), StringGuard)

    @pytest.mark.parametrize("value", [0, 1.5, -3])
    def test_of_routes_numbers(self, guard, value):
        assert isinstance(guard.of(value, "x"), NumericGuard)

    def test_clause_carries_guard_config(self):
        config = GuardConfig(default_label="arg")
        clause = Guard(config).numeric(1)
        assert clause.config is config


class TestLabels:

    def test_explicit_label_wins(self, guard):
        age = 1
        assert guard.numeric(age, "years").label == "years"

    def test_captures_simple_name(self, guard):
        age = 17
        with pytest.raises(BoundsViolation, match=re.escape("age must be at least 18.")):
            guard.numeric(age).min(18)

    def test_captures_attribute_expression(self, guard):
        class User:
            name = ""

        user = User()
        assert guard.string(user.name).label == "user.name"

    def test_captures_through_of(self, guard):
        title = "  "
        with pytest.raises(ShapeViolation, match=re.escape("title should not be null or whitespace.")):
            guard.of(title).not_null_or_whitespace()

    def test_module_level_of_captures(self):
        count = 0
        assert of(count).label == "count"

    def test_empty_label_falls_back_to_capture(self, guard):
        size = 3
        assert guard.numeric(size, "").label == "size"

    def test_ambiguous_line_uses_default(self, guard):
        a, b = 1, 2
        first, second = guard.numeric(a), guard.numeric(b)
        assert first.label == "value"
        assert second.label == "value"

    def test_literal_argument_is_captured_verbatim(self, guard):
        assert guard.numeric(3 + 4).label == "3 + 4"

    def test_aliased_entry_point_uses_default(self, guard):
        check = guard.numeric
        age = 1
        assert check(age).label == "value"

    def test_multi_line_call_uses_default(self, guard):
        age = 1
        clause = guard.numeric(
            age,
        )
        assert clause.label == "value"

    def test_capture_disabled_uses_default_label(self):
        guard = Guard(GuardConfig(capture_labels=False, default_label="param"))
        age = 1
        assert guard.numeric(age).label == "param"

    def test_capture_label_without_frame(self):
        assert capture_label(None) is None

    def test_default_label_must_be_non_empty(self):
        with pytest.raises(ValueError):
            GuardConfig(default_label="")


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.DEFAULT_LABEL == "value"
        assert settings.CAPTURE_LABELS is True
        assert settings.LOG_VIOLATIONS is False

    def test_environment_feeds_default_guard(self, monkeypatch):
        monkeypatch.setenv("GUARDR_DEFAULT_LABEL", "argument")
        monkeypatch.setenv("GUARDR_CAPTURE_LABELS", "false")
        monkeypatch.setenv("GUARDR_LOG_VIOLATIONS", "true")
        config = default_guard().config
        assert config.default_label == "argument"
        assert config.capture_labels is False
        assert config.log_violations is True

    def test_from_settings_keeps_message_provider_injectable(self):
        sentinel = object()
        config = GuardConfig.from_settings(Settings(), message_provider=sentinel)
        assert config.message_provider is sentinel
