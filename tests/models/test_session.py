# tests/models/test_session.py
"""Tests for session models."""

import re
from datetime import UTC

from speccraft.models import Answer, Question, Session


class TestAnswer:
    def test_timestamp_is_utc(self):
        answer = Answer(question_id="feature-overview", value="Comments")
        assert answer.timestamp.tzinfo is UTC

    def test_value_types(self):
        assert Answer(question_id="a", value=True).value is True
        assert Answer(question_id="b", value=["x", "y"]).value == ["x", "y"]
        assert Answer(question_id="c", value="text").value == "text"


class TestSession:
    def test_defaults(self):
        session = Session(feature_title="Comments")
        assert re.fullmatch(r"questionnaire_[0-9a-f]{32}", session.id)
        assert session.cursor == 0
        assert session.answers == []
        assert session.is_complete is False
        assert session.dynamic_questions == []

    def test_unique_ids(self):
        assert Session(feature_title="A").id != Session(feature_title="B").id

    def test_answer_for(self):
        session = Session(
            feature_title="Comments",
            answers=[Answer(question_id="feature-overview", value="Discuss posts")],
        )
        found = session.answer_for("feature-overview")
        assert found is not None
        assert found.value == "Discuss posts"
        assert session.answer_for("target-users") is None

    def test_touch_updates_timestamp(self):
        session = Session(feature_title="Comments")
        before = session.updated_at
        session.touch()
        assert session.updated_at >= before

    def test_json_round_trip_keeps_value_types(self):
        session = Session(
            feature_title="Comments",
            answers=[
                Answer(question_id="responsive-design", value=True),
                Answer(question_id="feature-overview", value="Discuss posts"),
                Answer(question_id="platforms", value=["web", "ios"]),
            ],
            dynamic_questions=[
                Question(
                    id="offline-mode",
                    text="Should it work offline?",
                    type="boolean",
                    category="technical",
                    order=100,
                )
            ],
        )
        restored = Session.model_validate(session.model_dump(mode="json"))
        assert restored == session
        assert restored.answers[0].value is True
        assert restored.answers[2].value == ["web", "ios"]
