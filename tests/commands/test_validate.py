# tests/commands/test_validate.py
"""Tests for the validate command."""

from speccraft.commands import validate


class TestValidateCommand:
    """Tests for validate.validate()."""

    def test_validate_new_session(self, store, session_id) -> None:
        """A new session is missing every required answer."""
        result = validate.validate(session_id, store=store)

        assert result.success is True
        assert result.is_valid is False
        assert len(result.missing_required) == 13
        assert result.completion_percentage == 0
        assert "Comments" in result.prompt

    def test_validate_completed(self, store, completed_session_id) -> None:
        result = validate.validate(completed_session_id, store=store)

        assert result.is_valid is True
        assert result.missing_required == []
        assert result.completion_percentage == 100

    def test_validate_unknown_session(self, store) -> None:
        result = validate.validate("missing", store=store)

        assert result.success is False
