# tests/commands/test_answer.py
"""Tests for the answer command."""

from speccraft.commands import answer, navigate


class TestAnswerCommand:
    """Tests for answer.answer()."""

    def test_answer_advances(self, store, session_id) -> None:
        """Answering records the value and moves to the next question."""
        result = answer.answer(session_id, "Let readers discuss posts", store=store)

        assert result.success is True
        assert result.answered.question_id == "feature-overview"
        assert result.answered_question.id == "feature-overview"
        assert result.question.id == "target-users"
        assert result.progress.current == 1

    def test_answer_is_persisted(self, store, session_id) -> None:
        """The new answer survives a reload of the session."""
        answer.answer(session_id, "Let readers discuss posts", store=store)

        stored = store.load(session_id)
        assert stored.answer_for("feature-overview").value == "Let readers discuss posts"
        assert stored.cursor == 1

    def test_answer_required_empty(self, store, session_id) -> None:
        """An empty answer to a required question is rejected."""
        result = answer.answer(session_id, "", store=store)

        assert result.success is False
        assert result.error == "This question is required"
        assert result.question_id == "feature-overview"
        assert store.load(session_id).answers == []

    def test_answer_coerces_boolean_strings(self, store, session_id) -> None:
        """'yes' answers a boolean question."""
        navigate.goto(session_id, "sensitive-data", store=store)

        result = answer.answer(session_id, "yes", store=store)

        assert result.success is True
        assert result.answered.value is True
        assert result.question.id == "security-requirements"

    def test_answer_invalid_select_option(self, store, session_id) -> None:
        """A select answer must be one of the options."""
        navigate.goto(session_id, "authentication-required", store=store)

        result = answer.answer(session_id, "Magic link", store=store)

        assert result.success is False
        assert result.question_id == "authentication-required"
        assert "Choose from" in result.error

    def test_answer_completed_session(self, store, completed_session_id) -> None:
        """A finished session has nothing left to answer."""
        result = answer.answer(completed_session_id, "More", store=store)

        assert result.success is False
        assert result.error == "No current question to answer"

    def test_answer_unknown_session(self, store) -> None:
        """Answering an unknown session returns an error."""
        result = answer.answer("missing", "text", store=store)

        assert result.success is False
        assert result.error == "Session missing not found"
