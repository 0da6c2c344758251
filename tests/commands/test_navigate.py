# tests/commands/test_navigate.py
"""Tests for the previous and goto commands."""

from speccraft.commands import answer, navigate


class TestPreviousCommand:
    """Tests for navigate.previous()."""

    def test_previous_at_start(self, store, session_id) -> None:
        """At the first question previous succeeds without moving."""
        result = navigate.previous(session_id, store=store)

        assert result.success is True
        assert result.moved is False
        assert result.question.id == "feature-overview"

    def test_previous_steps_back(self, store, session_id) -> None:
        """Previous returns to the question answered last."""
        answer.answer(session_id, "Let readers discuss posts", store=store)

        result = navigate.previous(session_id, store=store)

        assert result.moved is True
        assert result.question.id == "feature-overview"
        assert store.load(session_id).cursor == 0

    def test_previous_keeps_answers(self, store, session_id) -> None:
        """Stepping back does not discard the recorded answer."""
        answer.answer(session_id, "Let readers discuss posts", store=store)
        navigate.previous(session_id, store=store)

        assert store.load(session_id).answer_for("feature-overview") is not None

    def test_previous_unknown_session(self, store) -> None:
        result = navigate.previous("missing", store=store)

        assert result.success is False


class TestGotoCommand:
    """Tests for navigate.goto()."""

    def test_goto_eligible_question(self, store, session_id) -> None:
        """Goto moves the cursor to an eligible question."""
        result = navigate.goto(session_id, "edge-cases", store=store)

        assert result.success is True
        assert result.moved is True
        assert result.question.id == "edge-cases"
        assert store.load(session_id).cursor == 16

    def test_goto_unknown_question(self, store, session_id) -> None:
        """A question id outside the catalog is not found."""
        result = navigate.goto(session_id, "no-such-question", store=store)

        assert result.success is False
        assert result.error == "Question no-such-question not found"

    def test_goto_hidden_question(self, store, session_id) -> None:
        """A question whose dependency is unmet cannot be reached."""
        result = navigate.goto(session_id, "security-requirements", store=store)

        assert result.success is False
        assert result.question_id == "security-requirements"
        assert "not available" in result.error
        assert store.load(session_id).cursor == 0
