# tests/commands/test_status.py
"""Tests for the status command."""

from speccraft.commands import answer, status


class TestStatusCommand:
    """Tests for status.status()."""

    def test_status_new_session(self, store, session_id) -> None:
        """A new session has no answers and every required question missing."""
        result = status.status(session_id, store=store)

        assert result.success is True
        assert result.feature_title == "Comments"
        assert result.feature_description == "Let readers comment on posts"
        assert result.answers == []
        assert len(result.missing_required) == 13
        assert result.created_at is not None
        assert result.updated_at >= result.created_at

    def test_status_after_answer(self, store, session_id) -> None:
        """Answers are listed in the order they were given."""
        answer.answer(session_id, "Let readers discuss posts", store=store)
        answer.answer(session_id, "Admin, Guest", store=store)

        result = status.status(session_id, store=store)

        assert [a.question_id for a in result.answers] == ["feature-overview", "target-users"]
        assert len(result.missing_required) == 11
        assert result.progress.current == 2

    def test_status_completed(self, store, completed_session_id) -> None:
        result = status.status(completed_session_id, store=store)

        assert result.is_complete is True
        assert result.missing_required == []
        assert result.progress.percentage == 100

    def test_status_unknown_session(self, store) -> None:
        result = status.status("missing", store=store)

        assert result.success is False
        assert result.error == "Session missing not found"
