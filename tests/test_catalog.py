# tests/test_catalog.py
"""Tests for the built-in question catalog."""

from speccraft.catalog import AUTHENTICATION_OPTIONS, BASE_QUESTIONS, QuestionCatalog
from speccraft.models import Question


def _question(question_id: str, order: int) -> Question:
    return Question(
        id=question_id, text=f"{question_id}?", type="text", category="overview", order=order
    )


class TestBaseQuestions:
    def test_has_21_questions(self):
        assert len(BASE_QUESTIONS) == 21

    def test_ids_unique(self):
        ids = [q.id for q in BASE_QUESTIONS]
        assert len(ids) == len(set(ids))

    def test_sorted_by_order(self):
        orders = [q.order for q in BASE_QUESTIONS]
        assert orders == sorted(orders)

    def test_first_and_last(self):
        assert BASE_QUESTIONS[0].id == "feature-overview"
        assert BASE_QUESTIONS[-1].id == "success-criteria"

    def test_security_requirements_depends_on_sensitive_data(self):
        question = QuestionCatalog().get("security-requirements")
        assert question is not None
        assert question.depends_on is not None
        assert question.depends_on.question_id == "sensitive-data"
        assert question.depends_on.value is True

    def test_authentication_options(self):
        question = QuestionCatalog().get("authentication-required")
        assert question is not None
        assert question.type == "select"
        assert question.options == AUTHENTICATION_OPTIONS


class TestQuestionCatalog:
    def test_sorts_by_order_stably(self):
        catalog = QuestionCatalog([_question("b", 2), _question("a1", 1), _question("a2", 1)])
        assert [q.id for q in catalog] == ["a1", "a2", "b"]

    def test_contains_and_get(self):
        catalog = QuestionCatalog([_question("a", 1)])
        assert "a" in catalog
        assert "missing" not in catalog
        assert catalog.get("missing") is None

    def test_insert_before_first_greater_order(self):
        catalog = QuestionCatalog([_question("a", 1), _question("c", 3)])
        index = catalog.insert(_question("b", 2))
        assert index == 1
        assert [q.id for q in catalog] == ["a", "b", "c"]

    def test_insert_after_equal_order(self):
        catalog = QuestionCatalog([_question("a", 1), _question("b", 2)])
        catalog.insert(_question("b2", 2))
        assert [q.id for q in catalog] == ["a", "b", "b2"]

    def test_insert_appends_when_largest(self):
        catalog = QuestionCatalog()
        index = catalog.insert(_question("follow-up", 100))
        assert index == len(catalog) - 1
        assert len(catalog) == 22

    def test_insert_does_not_change_base_questions(self):
        QuestionCatalog().insert(_question("follow-up", 100))
        assert len(BASE_QUESTIONS) == 21
        assert len(QuestionCatalog()) == 21
