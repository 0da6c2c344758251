# src/speccraft/prompts.py
"""Prompt builders for the assistant on the other side of the protocol.

SpecCraft never calls a language model itself. These prompts are handed
back to the client (an AI coding assistant) together with the session
context, and any follow-up questions it proposes come back as JSON that
``parse_generated_questions`` turns into ``GeneratedQuestion`` records.
"""

from __future__ import annotations

import json
import re

from pydantic import ValidationError as PydanticValidationError

from speccraft.exceptions import PreconditionError, ValidationError
from speccraft.generator import stringify_value
from speccraft.models import Answer, GeneratedQuestion, Question, Session

CONTEXT_PROMPT = """You are SpecCraft, an assistant that helps write detailed software feature \
specifications by asking targeted questions.

Current Feature:
Title: {title}
Description: {description}

Current Responses:{responses}"""

FOLLOW_UP_PROMPT = """{context}

The user just answered: {question_id} = {value}

Based on this answer and the overall context, suggest up to {max_questions} follow-up questions \
that would make the specification more detailed and complete.

Focus on:
1. Clarifying ambiguous or vague responses
2. Uncovering edge cases the user might not have considered
3. Exploring technical implications
4. Understanding user experience details
5. Identifying potential integration points

Return a JSON array. Each element must have: "id" (kebab-case, unique), "text" (the question), \
"type" (one of text, textarea, select, multiselect, boolean), "required" (true/false), \
"category" (one of overview, functional, technical, ui_ux, performance, security), \
"reasoning" (why it matters) and, for select/multiselect, "options".

Example output:
[{{"id": "offline-mode", "text": "Should the feature keep working while offline?", \
"type": "boolean", "required": false, "category": "technical", \
"reasoning": "Offline support changes storage and sync design."}}]

Return an empty array if the current responses are already sufficient."""

IMPROVEMENT_PROMPT = """{context}

Current Question: {question_text}
Question Type: {question_type}
Category: {question_category}

Analyze this question in the context of the feature and current responses. Suggest improvements \
to make it:
1. More specific and actionable
2. Better at uncovering important details
3. Clearer and easier to understand
4. More relevant to software development

Say whether the question needs improvement and explain your reasoning."""

COMPLETENESS_PROMPT = """{context}

Analyze this feature specification for completeness. Consider:
1. Are all critical aspects covered? (functionality, UI/UX, performance, security, edge cases)
2. Are there any obvious gaps in requirements?
3. Would a developer have enough information to implement this feature?
4. Are there missing technical considerations?

Provide:
- Estimated completion percentage
- Missing areas that need attention
- Critical gaps that must be addressed
- Suggested questions to fill the gaps
- Overall assessment summary

Be conservative: only call it complete if it is ready for development."""

QUALITY_PROMPT = """{context}

Generated Specification:
{markdown}

Assess the quality of this specification:
- Clarity: how clear and understandable is it?
- Completeness: how thorough is it?
- Specificity: how specific and actionable are the requirements?
- Implementability: how ready is it for development?

Provide an overall score (0-100), a score per dimension, key strengths, weaknesses, concrete \
recommendations, and whether it is ready for development."""

INFERENCE_PROMPT = """{context}

{question_details}

Decide whether the answer to this question can be inferred with confidence from the feature \
title, description and previous responses.

Rules:
- Only suggest an answer if you are at least 90% confident it is correct
- Respect the question type and, for select/multiselect, the valid options
- Do not assume anything that is not explicitly implied

If you can infer the answer, respond with:
CONFIDENCE: [0.0-1.0]
INFERRED_ANSWER: [the answer value]
REASONING: [why the inference is justified]

Otherwise respond with:
CONFIDENCE: 0.0
REASONING: [why the user has to answer]"""


class FollowUpPrompter:
    """Builds assistant prompts from a session's context."""

    def __init__(self, max_follow_up_questions: int = 3) -> None:
        self.max_follow_up_questions = max_follow_up_questions

    def context_prompt(self, session: Session) -> str:
        lines = "".join(
            f"\n- {a.question_id}: {stringify_value(a.value)}" for a in session.answers
        )
        return CONTEXT_PROMPT.format(
            title=session.feature_title,
            description=session.feature_description,
            responses=lines,
        )

    def follow_up_prompt(self, session: Session, last_answer: Answer | None = None) -> str:
        """Ask for follow-up questions about the most recent answer.

        Raises:
            PreconditionError: The session has no answers yet.
        """
        if last_answer is None:
            if not session.answers:
                raise PreconditionError("No responses yet. Answer some questions first.")
            last_answer = session.answers[-1]
        return FOLLOW_UP_PROMPT.format(
            context=self.context_prompt(session),
            question_id=last_answer.question_id,
            value=stringify_value(last_answer.value),
            max_questions=self.max_follow_up_questions,
        )

    def improvement_prompt(self, session: Session, question: Question) -> str:
        return IMPROVEMENT_PROMPT.format(
            context=self.context_prompt(session),
            question_text=question.text,
            question_type=question.type,
            question_category=question.category,
        )

    def completeness_prompt(self, session: Session) -> str:
        return COMPLETENESS_PROMPT.format(context=self.context_prompt(session))

    def quality_prompt(self, session: Session, markdown: str) -> str:
        return QUALITY_PROMPT.format(context=self.context_prompt(session), markdown=markdown)

    def inference_prompt(self, session: Session, question: Question) -> str:
        details = [
            f"Next Question ID: {question.id}",
            f"Question Text: {question.text}",
            f"Question Type: {question.type}",
            f"Required: {'true' if question.required else 'false'}",
        ]
        if question.options:
            details.append(f"Valid Options: {', '.join(question.options)}")
        return INFERENCE_PROMPT.format(
            context=self.context_prompt(session),
            question_details="\n".join(details),
        )


def parse_generated_questions(
    response_text: str, limit: int | None = None
) -> list[GeneratedQuestion]:
    """Parse an assistant's JSON reply into GeneratedQuestion records.

    Accepts a bare JSON array, a single object, or either wrapped in a
    markdown code block.

    Raises:
        ValidationError: The reply is not JSON or an entry is malformed.
    """
    response_text = response_text.strip()
    json_match = re.search(r"```(?:json)?\n(.*?)\n```", response_text, re.DOTALL)
    if json_match:
        response_text = json_match.group(1).strip()

    try:
        parsed = json.loads(response_text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Follow-up questions must be JSON: {e}") from e

    if isinstance(parsed, dict):
        parsed = parsed.get("questions", [parsed])
    if not isinstance(parsed, list):
        raise ValidationError("Follow-up questions must be a JSON array of objects")

    questions: list[GeneratedQuestion] = []
    for entry in parsed:
        try:
            questions.append(GeneratedQuestion.model_validate(entry))
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid follow-up question: {e}") from e

    if limit is not None:
        questions = questions[:limit]
    return questions
