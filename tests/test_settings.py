"""
Tests for settings.py - environment configuration.
"""

import pytest

from modoshi.settings import read_non_negative_int


class TestReadNonNegativeInt:
    """Tests for reading integer settings from the environment."""

    def test_unset_gives_default(self):
        assert read_non_negative_int("MODOSHI_MAX_RESULTS", 7, environ={}) == 7

    def test_empty_gives_default(self):
        assert read_non_negative_int("MODOSHI_MAX_RESULTS", 0, environ={"MODOSHI_MAX_RESULTS": " "}) == 0

    def test_value(self):
        assert read_non_negative_int("MODOSHI_MAX_RESULTS", 0, environ={"MODOSHI_MAX_RESULTS": "25"}) == 25

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("MODOSHI_MAX_RESULTS", "3")
        assert read_non_negative_int("MODOSHI_MAX_RESULTS", 0) == 3

    def test_malformed_names_the_variable(self):
        with pytest.raises(ValueError, match="MODOSHI_MAX_RESULTS must be an integer"):
            read_non_negative_int("MODOSHI_MAX_RESULTS", 0, environ={"MODOSHI_MAX_RESULTS": "lots"})

    def test_negative_names_the_variable(self):
        with pytest.raises(ValueError, match="MODOSHI_MAX_RESULTS must be 0 or positive"):
            read_non_negative_int("MODOSHI_MAX_RESULTS", 0, environ={"MODOSHI_MAX_RESULTS": "-1"})
