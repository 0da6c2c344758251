# src/speccraft/commands/base.py
"""Base types for the commands layer.

This module defines the data structures used by all commands:
- Result types for each command
- Session loading shared by the session-scoped commands
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from speccraft.config import build_settings, get_store, load_config
from speccraft.engine import QuestionnaireEngine
from speccraft.exceptions import ConfigError, NotFoundError
from speccraft.models import Answer, Progress, Question
from speccraft.settings import Settings
from speccraft.stores import SessionStore


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class SessionResult(CommandResult):
    """Result of a command that moves through a questionnaire.

    Attributes:
        session_id: Session the command operated on
        feature_title: Title of the feature being specified
        question: Current question after the command (None when complete)
        progress: Progress after the command
        is_complete: True once every eligible question has been passed
        question_id: Question a validation error refers to, if any
    """

    session_id: str = ""
    feature_title: str = ""
    question: Question | None = None
    progress: Progress | None = None
    is_complete: bool = False
    question_id: str | None = None


@dataclass
class ContinueResult(SessionResult):
    """Result of the continue command.

    Attributes:
        improvement_prompt: Prompt to reword the current question for this feature
        inference_prompt: Prompt to propose an answer from the answers so far
    """

    improvement_prompt: str = ""
    inference_prompt: str = ""


@dataclass
class AnswerResult(SessionResult):
    """Result of the answer command.

    Attributes:
        answered: The answer that was recorded
        answered_question: The question it answered
    """

    answered: Answer | None = None
    answered_question: Question | None = None


@dataclass
class NavigationResult(SessionResult):
    """Result of the previous and goto commands.

    Attributes:
        moved: False when the cursor was already at the first question
    """

    moved: bool = False


@dataclass
class StatusResult(SessionResult):
    """Snapshot of a session.

    Attributes:
        feature_description: Description given at creation
        answers: Recorded answers in the order they were given
        missing_required: Text of eligible required questions with no answer
        created_at: Creation time
        updated_at: Last modification time
    """

    feature_description: str = ""
    answers: list[Answer] = field(default_factory=list)
    missing_required: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class SessionInfo:
    """Summary of a stored session."""

    session_id: str
    feature_title: str
    percentage: int
    is_complete: bool
    updated_at: datetime


@dataclass
class ListResult(CommandResult):
    """Result of the list command."""

    sessions: list[SessionInfo] = field(default_factory=list)


@dataclass
class GenerateResult(CommandResult):
    """Result of the generate command.

    Attributes:
        session_id: Session that was rendered
        feature_title: Title used for the document heading
        markdown: The full specification
        preview: First characters of the markdown
        path: Where the specification was written
        completion_percentage: Progress at the time of the call
        missing_required: Required questions still unanswered (on failure)
        review_prompt: Prompt asking an assistant to assess the document's quality
    """

    session_id: str = ""
    feature_title: str = ""
    markdown: str = ""
    preview: str = ""
    path: str | None = None
    completion_percentage: int = 0
    missing_required: list[str] = field(default_factory=list)
    review_prompt: str = ""


@dataclass
class ValidateResult(CommandResult):
    """Result of the validate command.

    Attributes:
        is_valid: True if every eligible required question has an answer
        missing_required: Text of the unanswered required questions
        completion_percentage: Progress through the eligible questions
        prompt: Completeness review prompt for an assistant
    """

    session_id: str = ""
    is_valid: bool = False
    missing_required: list[str] = field(default_factory=list)
    completion_percentage: int = 0
    prompt: str = ""


@dataclass
class FollowUpResult(CommandResult):
    """Result of the follow-up command."""

    session_id: str = ""
    prompt: str = ""
    max_questions: int = 0


@dataclass
class AddQuestionResult(SessionResult):
    """Result of adding follow-up questions to a session.

    Attributes:
        added: Ids of the questions that were inserted
    """

    added: list[str] = field(default_factory=list)


@dataclass
class DeleteResult(CommandResult):
    """Result of the delete command."""

    session_id: str = ""


@dataclass
class SettingInfo:
    """Information about a single setting."""

    name: str
    value: str
    source: str  # "env var", "yaml", "default"


@dataclass
class ConfigResult(CommandResult):
    """Result of the config command.

    Attributes:
        data_dir: Data directory path
        store: Session store type (json, sqlite)
        settings: List of behavioral settings with sources
        config_path: Path to config file (if found)
        warnings: Unknown keys found in the config file
    """

    data_dir: str = ""
    store: str = "json"
    settings: list[SettingInfo] = field(default_factory=list)
    config_path: str | None = None
    warnings: list[str] = field(default_factory=list)


def resolve_store(
    store: SessionStore | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> SessionStore:
    """Return ``store`` if given, otherwise the store selected by config.

    Raises:
        ConfigError: The config file names an unknown store type.
    """
    if store is not None:
        return store
    try:
        return get_store(data_dir, config_path)
    except ValueError as e:
        raise ConfigError(str(e)) from e


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Build Settings from the config file and SPECCRAFT_* variables.

    Raises:
        ConfigError: A setting is out of range or has the wrong type.
    """
    try:
        return build_settings(load_config(config_path))
    except ValueError as e:
        raise ConfigError(f"Invalid settings: {e}") from e


def load_engine(store: SessionStore, session_id: str) -> QuestionnaireEngine:
    """Load a session and wrap it in an engine.

    Raises:
        NotFoundError: No session with ``session_id`` is stored.
    """
    session = store.load(session_id)
    if session is None:
        raise NotFoundError("session", session_id)
    return QuestionnaireEngine(session)


def fill_session_result(result: SessionResult, engine: QuestionnaireEngine) -> SessionResult:
    """Copy the engine's current position into ``result``."""
    result.session_id = engine.session.id
    result.feature_title = engine.session.feature_title
    result.question = engine.get_current_question()
    result.progress = engine.get_progress()
    result.is_complete = engine.is_complete()
    return result
