"""Tests for agent configuration and CLI value parsing."""

import pytest

from affectsim.config import (
    DEFAULT_HISTORY_LIMIT,
    UINT64_MAX,
    AgentConfig,
    parse_history,
    parse_seed,
)


class TestAgentConfig:
    """Tests for AgentConfig validation."""

    def test_defaults(self):
        """Defaults match the documented values."""
        config = AgentConfig()
        assert config.seed is None
        assert config.history_limit == DEFAULT_HISTORY_LIMIT
        assert config.recent_window == 5

    @pytest.mark.parametrize(
        "kwargs",
        [{"seed": -1}, {"seed": UINT64_MAX + 1}, {"recent_window": -1}, {"boost_probability": 1.5}],
    )
    def test_rejects_invalid_values(self, kwargs):
        """Out-of-range parameters raise ValueError."""
        with pytest.raises(ValueError):
            AgentConfig(**kwargs)


class TestParseSeed:
    """Tests for parse_seed()."""

    @pytest.mark.parametrize(
        "raw,expected",
        [("0", 0), ("42", 42), ("007", 7), ("+5", 5), (str(UINT64_MAX), UINT64_MAX)],
    )
    def test_accepts_unsigned_decimal(self, raw, expected):
        """Plain decimal strings in range parse."""
        assert parse_seed(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["", "abc", "-1", "1_000", " 7", "7 ", "1e3", "0x10", "٣", str(UINT64_MAX + 1)],
    )
    def test_rejects_everything_else(self, raw):
        """Signs, separators, whitespace and out-of-range values are rejected."""
        assert parse_seed(raw) is None


class TestParseHistory:
    """Tests for parse_history()."""

    @pytest.mark.parametrize("raw,expected", [("0", 0), ("3", 3), ("-2", -2), ("+4", 4)])
    def test_accepts_signed_decimal(self, raw, expected):
        """Signed decimal strings parse."""
        assert parse_history(raw) == expected

    @pytest.mark.parametrize("raw", ["", "A", "2.5", "1_0", " 3", str(1 << 63)])
    def test_rejects_everything_else(self, raw):
        """Non-integers and values outside 64 bits are rejected."""
        assert parse_history(raw) is None
