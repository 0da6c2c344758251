# tests/test_prompts.py
"""Tests for assistant prompt building and reply parsing."""

import pytest

from speccraft.catalog import QuestionCatalog
from speccraft.exceptions import PreconditionError, ValidationError
from speccraft.models import Answer, Session
from speccraft.prompts import FollowUpPrompter, parse_generated_questions


@pytest.fixture
def session():
    return Session(
        feature_title="Comments",
        feature_description="Let readers comment on posts",
        answers=[
            Answer(question_id="feature-overview", value="Discussion under posts"),
            Answer(question_id="responsive-design", value=True),
        ],
    )


class TestFollowUpPrompter:
    def test_context_prompt(self, session):
        prompt = FollowUpPrompter().context_prompt(session)
        assert "Title: Comments" in prompt
        assert "Description: Let readers comment on posts" in prompt
        assert "- feature-overview: Discussion under posts" in prompt
        assert "- responsive-design: true" in prompt

    def test_follow_up_uses_last_answer(self, session):
        prompt = FollowUpPrompter(max_follow_up_questions=2).follow_up_prompt(session)
        assert "The user just answered: responsive-design = true" in prompt
        assert "up to 2 follow-up questions" in prompt

    def test_follow_up_requires_answers(self):
        with pytest.raises(PreconditionError):
            FollowUpPrompter().follow_up_prompt(Session(feature_title="Empty"))

    def test_inference_prompt_lists_options(self, session):
        question = QuestionCatalog().get("authentication-required")
        prompt = FollowUpPrompter().inference_prompt(session, question)
        assert "Next Question ID: authentication-required" in prompt
        assert "Valid Options: No authentication needed, Optional authentication" in prompt

    def test_quality_prompt_includes_markdown(self, session):
        prompt = FollowUpPrompter().quality_prompt(session, "# Feature: Comments")
        assert "# Feature: Comments" in prompt

    def test_completeness_and_improvement_prompts(self, session):
        prompter = FollowUpPrompter()
        assert "completion percentage" in prompter.completeness_prompt(session)
        question = QuestionCatalog().get("target-users")
        assert "Current Question: Who are the primary users" in prompter.improvement_prompt(
            session, question
        )


class TestParseGeneratedQuestions:
    REPLY = """Here you go:
```json
[
  {"id": "offline-mode", "text": "Should comments work offline?", "type": "boolean",
   "required": false, "category": "technical", "reasoning": "Affects sync"},
  {"id": "moderation", "text": "Who moderates abusive comments?", "type": "textarea",
   "required": true, "category": "functional"}
]
```"""

    def test_parses_code_block(self):
        questions = parse_generated_questions(self.REPLY)
        assert [q.id for q in questions] == ["offline-mode", "moderation"]
        assert questions[0].reasoning == "Affects sync"
        assert questions[1].order == 100

    def test_limit(self):
        assert len(parse_generated_questions(self.REPLY, limit=1)) == 1

    def test_object_with_questions_key(self):
        reply = (
            '{"questions": [{"id": "q", "text": "A long enough question?", '
            '"type": "text", "category": "overview"}]}'
        )
        assert parse_generated_questions(reply)[0].id == "q"

    def test_single_object(self):
        reply = (
            '{"id": "q", "text": "A long enough question?", '
            '"type": "text", "category": "overview"}'
        )
        assert len(parse_generated_questions(reply)) == 1

    def test_empty_array(self):
        assert parse_generated_questions("[]") == []

    def test_not_json(self):
        with pytest.raises(ValidationError, match="must be JSON"):
            parse_generated_questions("Sorry, I can't help with that.")

    def test_invalid_entry(self):
        with pytest.raises(ValidationError, match="Invalid follow-up question"):
            parse_generated_questions('[{"id": "q", "text": "Short", "type": "text"}]')
