# tests/models/test_question.py
"""Tests for question models."""

import pytest
from pydantic import ValidationError

from speccraft.models import DependencyRule, GeneratedQuestion, Question


class TestQuestion:
    def test_create_text_question(self):
        question = Question(
            id="feature-overview",
            text="What should it do?",
            type="textarea",
            required=True,
            category="overview",
            order=1,
        )
        assert question.options is None
        assert question.depends_on is None

    def test_select_requires_options(self):
        with pytest.raises(ValidationError):
            Question(id="auth", text="Auth?", type="select", category="security", order=1)

    def test_text_rejects_options(self):
        with pytest.raises(ValidationError):
            Question(
                id="notes",
                text="Notes?",
                type="text",
                category="overview",
                order=1,
                options=["a"],
            )

    def test_order_must_be_positive(self):
        with pytest.raises(ValidationError):
            Question(id="q", text="Q?", type="text", category="overview", order=0)

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            Question(id="q", text="Q?", type="text", category="marketing", order=1)

    def test_is_frozen(self):
        question = Question(id="q", text="Q?", type="text", category="overview", order=1)
        with pytest.raises(ValidationError):
            question.text = "changed"

    def test_dependency_rule(self):
        question = Question(
            id="security-requirements",
            text="Security?",
            type="textarea",
            category="security",
            order=42,
            depends_on=DependencyRule(question_id="sensitive-data", value=True),
        )
        assert question.depends_on is not None
        assert question.depends_on.value is True


class TestGeneratedQuestion:
    def test_defaults(self):
        generated = GeneratedQuestion(
            id="offline-mode",
            text="Should the feature work offline?",
            type="boolean",
            category="technical",
        )
        assert generated.order == 100
        assert generated.required is False
        assert generated.reasoning == ""

    def test_text_min_length(self):
        with pytest.raises(ValidationError):
            GeneratedQuestion(id="short", text="Why?", type="text", category="overview")

    def test_to_question_drops_reasoning(self):
        generated = GeneratedQuestion(
            id="export-format",
            text="Which export formats are needed?",
            type="multiselect",
            category="functional",
            reasoning="Exports drive the data model",
            options=["CSV", "JSON"],
        )
        question = generated.to_question()
        assert isinstance(question, Question)
        assert question.id == "export-format"
        assert question.order == 100
        assert question.options == ["CSV", "JSON"]
        assert not hasattr(question, "reasoning")

    def test_select_without_options_rejected(self):
        with pytest.raises(ValidationError, match="needs options"):
            GeneratedQuestion(
                id="pick-one",
                text="Which plan should new users start on?",
                type="select",
                category="functional",
            )

    def test_text_with_options_rejected(self):
        with pytest.raises(ValidationError, match="cannot have options"):
            GeneratedQuestion(
                id="notes",
                text="Anything else the team should know?",
                type="text",
                category="overview",
                options=["yes"],
            )
