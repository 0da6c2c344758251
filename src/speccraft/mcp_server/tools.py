"""Declarative tool registry for the MCP server.

Every tool maps onto one command from ``speccraft.commands`` and renders
its result as markdown for the client's assistant. Commands are
synchronous (they touch the session store), so ``execute_tool`` runs them
in a worker thread.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from speccraft.commands import (
    answer,
    follow_up,
    generate,
    list_cmd,
    navigate,
    new,
    status,
    validate,
)
from speccraft.commands.base import CommandResult, SessionResult
from speccraft.exceptions import SpecCraftError
from speccraft.generator import stringify_value
from speccraft.models import Progress, Question
from speccraft.stores import SessionStore

logger = logging.getLogger(__name__)


class ToolExecutionError(SpecCraftError):
    """A tool's command reported a failure."""


@dataclass
class ToolContext:
    """Where tools find sessions and configuration."""

    store: SessionStore | None = None
    data_dir: str | None = None
    config_path: str | Path | None = None

    def command_kwargs(self) -> dict[str, Any]:
        return {"store": self.store, "data_dir": self.data_dir, "config_path": self.config_path}


@dataclass
class Tool:
    """Tool definition with metadata and implementation."""

    name: str
    description: str
    parameters: dict[str, Any]
    implementation: Callable[[dict[str, Any], ToolContext], str]


def _check(result: CommandResult) -> None:
    if not result.success:
        raise ToolExecutionError(result.error or "Command failed")


def _progress_line(progress: Progress | None) -> str:
    if progress is None:
        return ""
    return f"**Progress**: {progress.current}/{progress.total} ({progress.percentage}%)"


def _question_block(question: Question) -> str:
    lines = [
        f"**Question** `{question.id}` ({question.category}):",
        question.text,
        "",
        f"**Type**: {question.type}",
        f"**Required**: {'Yes' if question.required else 'No'}",
    ]
    if question.options:
        lines.append("**Options**: " + ", ".join(question.options))
    return "\n".join(lines)


def _position(result: SessionResult) -> str:
    """Markdown for the session's current question or its completion."""
    if result.question is None:
        return (
            "All questions are answered. Call `spec_generate` with session ID "
            f'"{result.session_id}" to write the specification.'
        )
    return (
        f"{_question_block(result.question)}\n\n"
        "Ask the user this question, then call `spec_answer` with session ID "
        f'"{result.session_id}" and their response.'
    )


# Tool implementations


def spec_new_impl(arguments: dict[str, Any], context: ToolContext) -> str:
    result = new.new(
        arguments["title"], arguments.get("description", ""), **context.command_kwargs()
    )
    _check(result)
    return (
        f"# SpecCraft Session Started: {result.feature_title}\n\n"
        f"**Session ID**: `{result.session_id}`\n"
        f"{_progress_line(result.progress)}\n\n"
        f"{_position(result)}"
    )


def spec_continue_impl(arguments: dict[str, Any], context: ToolContext) -> str:
    result = new.continue_session(arguments["session_id"], **context.command_kwargs())
    _check(result)
    text = (
        f"# Continuing: {result.feature_title}\n\n"
        f"**Session ID**: `{result.session_id}`\n"
        f"{_progress_line(result.progress)}\n\n"
        f"{_position(result)}"
    )
    prompt = {
        "improve": result.improvement_prompt,
        "infer": result.inference_prompt,
    }.get(arguments.get("prompt") or "", "")
    if prompt:
        text += f"\n\n## Assistant prompt\n\n{prompt}"
    return text


def spec_answer_impl(arguments: dict[str, Any], context: ToolContext) -> str:
    result = answer.answer(
        arguments["session_id"], arguments.get("answer"), **context.command_kwargs()
    )
    _check(result)
    answered = result.answered.question_id if result.answered else "question"
    return (
        f"Recorded answer for `{answered}`.\n\n"
        f"{_progress_line(result.progress)}\n\n{_position(result)}"
    )


def spec_previous_impl(arguments: dict[str, Any], context: ToolContext) -> str:
    result = navigate.previous(arguments["session_id"], **context.command_kwargs())
    _check(result)
    header = "Moved back one question." if result.moved else "Already at the first question."
    return f"{header}\n\n{_progress_line(result.progress)}\n\n{_position(result)}"


def spec_goto_impl(arguments: dict[str, Any], context: ToolContext) -> str:
    result = navigate.goto(
        arguments["session_id"], arguments["question_id"], **context.command_kwargs()
    )
    _check(result)
    return (
        f"Moved to `{arguments['question_id']}`.\n\n"
        f"{_progress_line(result.progress)}\n\n{_position(result)}"
    )


def spec_status_impl(arguments: dict[str, Any], context: ToolContext) -> str:
    result = status.status(arguments["session_id"], **context.command_kwargs())
    _check(result)

    lines = [
        f"# Status: {result.feature_title}",
        "",
        f"**Session ID**: `{result.session_id}`",
        _progress_line(result.progress),
        f"**Complete**: {'Yes' if result.is_complete else 'No'}",
        f"**Current question**: {result.question.id if result.question else '(none)'}",
        "",
        "## Answers",
        "",
    ]
    if result.answers:
        lines.extend(f"- `{a.question_id}`: {stringify_value(a.value)}" for a in result.answers)
    else:
        lines.append("No answers yet.")
    if result.missing_required:
        lines.extend(["", "## Missing required answers", ""])
        lines.extend(f"- {text}" for text in result.missing_required)
    return "\n".join(lines)


def spec_list_impl(arguments: dict[str, Any], context: ToolContext) -> str:
    result = list_cmd.list_sessions(**context.command_kwargs())
    _check(result)
    if not result.sessions:
        return "No sessions. Start one with `spec_new`."
    lines = [f"# Sessions ({len(result.sessions)})", ""]
    lines.extend(
        f"- `{info.session_id}`: {info.feature_title} ({info.percentage}%"
        f"{', complete' if info.is_complete else ''})"
        for info in result.sessions
    )
    return "\n".join(lines)


def spec_generate_impl(arguments: dict[str, Any], context: ToolContext) -> str:
    result = generate.generate(
        arguments["session_id"],
        output_path=arguments.get("output_path"),
        **context.command_kwargs(),
    )
    if not result.success and result.missing_required:
        missing = "; ".join(result.missing_required)
        raise ToolExecutionError(f"{result.error} Missing: {missing}")
    _check(result)
    text = (
        f"# Specification Generated: {result.feature_title}\n\n"
        f"**File**: `{result.path}`\n"
        f"**Completion**: {result.completion_percentage}%\n\n"
        f"**Preview**:\n```markdown\n{result.preview}...\n```"
    )
    if arguments.get("review"):
        text += f"\n\n## Review prompt\n\n{result.review_prompt}"
    return text


def spec_validate_impl(arguments: dict[str, Any], context: ToolContext) -> str:
    result = validate.validate(arguments["session_id"], **context.command_kwargs())
    _check(result)
    if result.is_valid:
        summary = "All required questions are answered."
    else:
        summary = "Missing required answers:\n" + "\n".join(
            f"- {text}" for text in result.missing_required
        )
    return (
        f"# Validation\n\n**Completion**: {result.completion_percentage}%\n\n{summary}\n\n"
        f"## Review prompt\n\n{result.prompt}"
    )


def spec_follow_up_impl(arguments: dict[str, Any], context: ToolContext) -> str:
    result = follow_up.follow_up(arguments["session_id"], **context.command_kwargs())
    _check(result)
    return (
        f"{result.prompt}\n\n"
        f'Pass each proposed question to `spec_add_question` with session ID "{result.session_id}".'
    )


def spec_add_question_impl(arguments: dict[str, Any], context: ToolContext) -> str:
    result = follow_up.add_question(
        arguments["session_id"], arguments["question"], **context.command_kwargs()
    )
    _check(result)
    return (
        f"Added `{', '.join(result.added)}`.\n\n{_progress_line(result.progress)}\n\n"
        f"{_position(result)}"
    )


_SESSION_ID = {"type": "string", "description": "Session ID returned by spec_new"}

_QUESTION_TYPES = ["text", "textarea", "select", "multiselect", "boolean"]
_CATEGORIES = ["overview", "functional", "technical", "ui_ux", "performance", "security"]


def _session_only(
    extra: dict[str, Any] | None = None, required: list[str] | None = None
) -> dict[str, Any]:
    properties = {"session_id": _SESSION_ID, **(extra or {})}
    return {
        "type": "object",
        "properties": properties,
        "required": ["session_id", *(required or [])],
    }


# Define all tools declaratively
TOOL_DEFINITIONS = [
    Tool(
        name="spec_new",
        description="Start a new specification questionnaire for a feature",
        parameters={
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Feature title"},
                "description": {"type": "string", "description": "Short feature description"},
            },
            "required": ["title"],
        },
        implementation=spec_new_impl,
    ),
    Tool(
        name="spec_continue",
        description="Show the current question of an existing session",
        parameters=_session_only(
            {
                "prompt": {
                    "type": "string",
                    "enum": ["improve", "infer"],
                    "description": (
                        "Also return a prompt to reword the current question (improve) "
                        "or to propose an answer from earlier ones (infer)"
                    ),
                }
            }
        ),
        implementation=spec_continue_impl,
    ),
    Tool(
        name="spec_answer",
        description=(
            "Answer the current question. Booleans accept true/false or yes/no; "
            "multiselect accepts a list or a comma-separated string."
        ),
        parameters=_session_only(
            {
                "answer": {
                    "description": "The user's answer",
                    "anyOf": [
                        {"type": "string"},
                        {"type": "boolean"},
                        {"type": "array", "items": {"type": "string"}},
                    ],
                }
            },
            required=["answer"],
        ),
        implementation=spec_answer_impl,
    ),
    Tool(
        name="spec_previous",
        description="Go back to the previous question",
        parameters=_session_only(),
        implementation=spec_previous_impl,
    ),
    Tool(
        name="spec_goto",
        description="Jump to a specific question, for example to change an earlier answer",
        parameters=_session_only(
            {"question_id": {"type": "string", "description": "Question ID to jump to"}},
            required=["question_id"],
        ),
        implementation=spec_goto_impl,
    ),
    Tool(
        name="spec_status",
        description="Show answers, progress and the current question of a session",
        parameters=_session_only(),
        implementation=spec_status_impl,
    ),
    Tool(
        name="spec_list",
        description="List stored specification sessions",
        parameters={"type": "object", "properties": {}},
        implementation=spec_list_impl,
    ),
    Tool(
        name="spec_generate",
        description=(
            "Write the markdown specification for a completed session "
            "(default: specs/NNN_<feature>/<feature>_spec.md)"
        ),
        parameters=_session_only(
            {
                "output_path": {"type": "string", "description": "Optional output file path"},
                "review": {
                    "type": "boolean",
                    "description": "Also return a quality review prompt for the document",
                },
            }
        ),
        implementation=spec_generate_impl,
    ),
    Tool(
        name="spec_validate",
        description="Check a session for unanswered required questions and get a review prompt",
        parameters=_session_only(),
        implementation=spec_validate_impl,
    ),
    Tool(
        name="spec_follow_up",
        description="Get a prompt for proposing follow-up questions about the latest answer",
        parameters=_session_only(),
        implementation=spec_follow_up_impl,
    ),
    Tool(
        name="spec_add_question",
        description="Insert a follow-up question into a session",
        parameters=_session_only(
            {
                "question": {
                    "type": "object",
                    "description": "Follow-up question to add",
                    "properties": {
                        "id": {"type": "string"},
                        "text": {"type": "string"},
                        "type": {"type": "string", "enum": _QUESTION_TYPES},
                        "required": {"type": "boolean", "default": False},
                        "category": {"type": "string", "enum": _CATEGORIES},
                        "reasoning": {"type": "string"},
                        "order": {"type": "integer", "default": 100},
                        "options": {"type": "array", "items": {"type": "string"}},
                    },
                    "required": ["id", "text", "type", "category"],
                }
            },
            required=["question"],
        ),
        implementation=spec_add_question_impl,
    ),
]

TOOL_REGISTRY: dict[str, Tool] = {tool.name: tool for tool in TOOL_DEFINITIONS}


async def execute_tool(
    tool_name: str,
    arguments: dict[str, Any],
    context: ToolContext,
) -> str:
    """Execute a tool from the registry.

    Args:
        tool_name: Name of the tool to execute
        arguments: Tool arguments from the request
        context: Store and configuration for the commands

    Returns:
        Markdown text for the client

    Raises:
        ValueError: If tool not found in registry
        ToolExecutionError: If the command fails
    """
    if tool_name not in TOOL_REGISTRY:
        raise ValueError(f"Unknown tool: {tool_name}")

    tool = TOOL_REGISTRY[tool_name]
    logger.debug("Executing %s", tool_name)
    return await asyncio.to_thread(tool.implementation, arguments or {}, context)
