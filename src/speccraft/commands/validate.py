# src/speccraft/commands/validate.py
"""Validate command - check a session for unanswered required questions."""

from __future__ import annotations

from pathlib import Path

from speccraft.commands.base import ValidateResult, load_engine, resolve_store
from speccraft.exceptions import SpecCraftError
from speccraft.factory import validate_specification_completeness
from speccraft.prompts import FollowUpPrompter
from speccraft.stores import SessionStore


def validate(
    session_id: str,
    store: SessionStore | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> ValidateResult:
    """Report missing required answers and build a completeness review prompt."""
    try:
        store = resolve_store(store, data_dir, config_path)
        engine = load_engine(store, session_id)
    except SpecCraftError as e:
        return ValidateResult(success=False, session_id=session_id, error=str(e))

    report = validate_specification_completeness(engine.session)
    return ValidateResult(
        success=True,
        session_id=session_id,
        is_valid=report.is_valid,
        missing_required=report.missing_required_questions,
        completion_percentage=engine.get_progress().percentage,
        prompt=FollowUpPrompter().completeness_prompt(engine.session),
    )
