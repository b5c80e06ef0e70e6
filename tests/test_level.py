"""Tests for passive_check/level.py — Level enum and to_level."""

import pytest

from passive_check.level import Level, to_level


# ── Level enum ─────────────────────────────────────────────────────

class TestLevelEnum:
    def test_ok_is_zero(self):
        assert Level.OK == 0

    def test_warning_is_one(self):
        assert Level.WARNING == 1

    def test_critical_is_two(self):
        assert Level.CRITICAL == 2

    def test_unknown_is_three(self):
        assert Level.UNKNOWN == 3

    def test_exactly_four_levels(self):
        assert [level.name for level in Level] == ["OK", "WARNING", "CRITICAL", "UNKNOWN"]


# ── to_level ───────────────────────────────────────────────────────

class TestToLevel:
    @pytest.mark.parametrize("text", ["Critical", "CRITICAL", "critical", "cRiTiCaL"])
    def test_critical_any_case(self, text):
        assert to_level(text) is Level.CRITICAL

    @pytest.mark.parametrize("text, expected", [
        ("ok", Level.OK),
        ("warning", Level.WARNING),
        ("critical", Level.CRITICAL),
        ("unknown", Level.UNKNOWN),
    ])
    def test_each_level_name(self, text, expected):
        assert to_level(text) is expected

    def test_surrounding_whitespace_ignored(self):
        assert to_level("  warning\n") is Level.WARNING

    @pytest.mark.parametrize("text", ["bogus", "", "warn", "crit", "2", "Level.OK"])
    def test_unrecognised_text_is_unknown(self, text):
        assert to_level(text) is Level.UNKNOWN

    @pytest.mark.parametrize("value", [None, 0, 2, b"ok"])
    def test_non_text_is_unknown(self, value):
        assert to_level(value) is Level.UNKNOWN
