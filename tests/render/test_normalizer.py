"""Tests for render/normalizer.py"""

import pytest

from procwatch import config
from procwatch.render.normalizer import normalize_output
from procwatch.telemetry import metrics


class TestNormalizeOutput:
    """Tests for normalize_output."""

    def test_mixed_line_endings(self, monkeypatch):
        """CRLF, CR and LF all become the host separator."""
        monkeypatch.setattr(config, "LINE_SEPARATOR", "\n")
        result = normalize_output("line1\r\nline2\rline3\n")
        assert result == "line1\nline2\nline3\n"
        assert result.splitlines() == ["line1", "line2", "line3"]

    def test_uses_configured_separator(self, monkeypatch):
        """The separator comes from config."""
        monkeypatch.setattr(config, "LINE_SEPARATOR", "\r\n")
        assert normalize_output("a\nb\rc") == "a\r\nb\r\nc"

    def test_crlf_is_one_break(self, monkeypatch):
        """A CRLF pair collapses to a single separator."""
        monkeypatch.setattr(config, "LINE_SEPARATOR", "\n")
        assert normalize_output("a\r\n\r\nb") == "a\n\nb"

    def test_other_characters_untouched(self):
        """Text without line breaks is returned unchanged."""
        text = "tabs\tand [markup] and ünïcode \x1b[31mred\x1b[0m"
        assert normalize_output(text) == text

    def test_empty(self):
        assert normalize_output("") == ""

    @pytest.mark.parametrize("value", [b"bytes\n", 42, ["a"]])
    def test_failure_degrades_to_empty(self, value):
        """Unprocessable input returns "" and is counted."""
        assert normalize_output(value) == ""
        assert metrics.normalize_errors == 1

    def test_none(self):
        """None is treated as empty output."""
        assert normalize_output(None) == ""
        assert metrics.normalize_errors == 0
