# src/speccraft/commands/__init__.py
"""UI-agnostic command layer for SpecCraft.

This module provides command functions that both the CLI and the MCP server
call. Commands return data structures, allowing each front end to render
results appropriately.

Usage:
    from speccraft.commands import answer, new

    result = new.new("Comments", "Let readers comment on posts")
    result = answer.answer(result.session_id, "A comment thread under each post")
"""

from speccraft.commands import (
    answer,
    config_cmd,
    delete,
    follow_up,
    generate,
    navigate,
    new,
    status,
    validate,
)
from speccraft.commands import list as list_cmd
from speccraft.commands.base import (
    AddQuestionResult,
    AnswerResult,
    CommandResult,
    ConfigResult,
    ContinueResult,
    DeleteResult,
    FollowUpResult,
    GenerateResult,
    ListResult,
    NavigationResult,
    SessionInfo,
    SessionResult,
    SettingInfo,
    StatusResult,
    ValidateResult,
)

__all__ = [
    # Base types
    "CommandResult",
    # Result types
    "SessionResult",
    "ContinueResult",
    "AnswerResult",
    "NavigationResult",
    "StatusResult",
    "ListResult",
    "SessionInfo",
    "GenerateResult",
    "ValidateResult",
    "FollowUpResult",
    "AddQuestionResult",
    "DeleteResult",
    "ConfigResult",
    "SettingInfo",
    # Command modules
    "new",
    "answer",
    "navigate",
    "status",
    "list_cmd",
    "generate",
    "validate",
    "follow_up",
    "delete",
    "config_cmd",
]
