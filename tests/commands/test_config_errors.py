# tests/commands/test_config_errors.py
"""Commands report configuration problems as failed results."""

import pytest

from speccraft.commands import (
    answer,
    delete,
    follow_up,
    generate,
    navigate,
    new,
    status,
    validate,
)
from speccraft.commands import list as list_cmd


@pytest.fixture
def unknown_store(tmp_path):
    (tmp_path / "speccraft.yaml").write_text("store: redis\n")


@pytest.fixture
def invalid_settings(tmp_path):
    (tmp_path / "speccraft.yaml").write_text("settings:\n  max_follow_up_questions: 0\n")


SESSION_COMMANDS = [
    lambda: new.continue_session("questionnaire_x"),
    lambda: answer.answer("questionnaire_x", "text"),
    lambda: navigate.previous("questionnaire_x"),
    lambda: navigate.goto("questionnaire_x", "edge-cases"),
    lambda: status.status("questionnaire_x"),
    lambda: generate.generate("questionnaire_x"),
    lambda: validate.validate("questionnaire_x"),
    lambda: follow_up.follow_up("questionnaire_x"),
    lambda: follow_up.add_generated_questions("questionnaire_x", "[]"),
    lambda: delete.delete("questionnaire_x"),
]


class TestUnknownStore:
    """An unknown ``store:`` value fails every command that needs the store."""

    def test_new(self, unknown_store) -> None:
        result = new.new("Comments")

        assert result.success is False
        assert result.error == "Unknown store type: redis"

    def test_list(self, unknown_store) -> None:
        result = list_cmd.list_sessions()

        assert result.success is False
        assert "redis" in result.error

    def test_add_question(self, unknown_store) -> None:
        result = follow_up.add_question(
            "questionnaire_x",
            {
                "id": "moderation-rules",
                "text": "How should abusive comments be moderated?",
                "type": "textarea",
                "category": "functional",
            },
        )

        assert result.success is False
        assert "redis" in result.error

    @pytest.mark.parametrize("command", SESSION_COMMANDS)
    def test_session_commands(self, unknown_store, command) -> None:
        result = command()

        assert result.success is False
        assert "Unknown store type" in result.error


class TestInvalidSettings:
    """Settings outside their range fail the commands that read them."""

    def test_follow_up(self, invalid_settings, store, session_id) -> None:
        result = follow_up.follow_up(session_id, store=store)

        assert result.success is False
        assert result.error.startswith("Invalid settings")

    def test_add_generated_questions(self, invalid_settings, store, session_id) -> None:
        result = follow_up.add_generated_questions(session_id, "[]", store=store)

        assert result.success is False
        assert result.error.startswith("Invalid settings")
