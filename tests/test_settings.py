# tests/test_settings.py
"""Tests for behavioral settings."""

import pytest
from pydantic import ValidationError

from speccraft.settings import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.max_follow_up_questions == 3
        assert settings.preview_chars == 500
        assert settings.specs_dir == "specs"

    def test_custom_values(self):
        settings = Settings(max_follow_up_questions=5, specs_dir="docs/specs")
        assert settings.max_follow_up_questions == 5
        assert settings.specs_dir == "docs/specs"

    def test_max_follow_up_questions_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(max_follow_up_questions=0)

    def test_preview_chars_not_negative(self):
        with pytest.raises(ValidationError):
            Settings(preview_chars=-1)

    def test_ignores_environment(self, monkeypatch):
        monkeypatch.setenv("SPECCRAFT_MAX_FOLLOW_UP_QUESTIONS", "9")
        assert Settings().max_follow_up_questions == 3
