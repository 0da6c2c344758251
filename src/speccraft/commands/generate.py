# src/speccraft/commands/generate.py
"""Generate command - render a finished session to a specification file."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from speccraft.commands.base import GenerateResult, load_engine, load_settings, resolve_store
from speccraft.exceptions import PreconditionError, SpecCraftError
from speccraft.factory import create_specification_from_session, ensure_ready_for_generation
from speccraft.output import write_specification
from speccraft.prompts import FollowUpPrompter
from speccraft.stores import SessionStore

logger = logging.getLogger(__name__)


def generate(
    session_id: str,
    output_path: str | Path | None = None,
    store: SessionStore | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    generated_on: date | None = None,
) -> GenerateResult:
    """Render a session and write the specification.

    Args:
        session_id: Session to render
        output_path: Destination file; default is
            ``<specs_dir>/NNN_<feature>/<feature>_spec.md``
        store: Session store (default: built from config)
        data_dir: Override data directory
        config_path: Override config file path
        generated_on: Footer date (default: today)

    Returns:
        GenerateResult with the markdown, the written path and a quality
        review prompt. Fails with the completion percentage when the session
        is not ready.
    """
    try:
        settings = load_settings(config_path)
        store = resolve_store(store, data_dir, config_path)
        engine = load_engine(store, session_id)
        ensure_ready_for_generation(engine.session)
    except PreconditionError as e:
        return GenerateResult(
            success=False,
            session_id=session_id,
            error=str(e),
            completion_percentage=e.completion_percentage,
            missing_required=e.missing,
        )
    except SpecCraftError as e:
        return GenerateResult(success=False, session_id=session_id, error=str(e))

    spec = create_specification_from_session(engine.session, generated_on)
    path = write_specification(
        spec.markdown,
        engine.session.feature_title,
        specs_dir=settings.specs_dir,
        output_path=output_path,
    )
    logger.info("Wrote specification for session %s to %s", session_id, path)

    return GenerateResult(
        success=True,
        session_id=session_id,
        feature_title=engine.session.feature_title,
        markdown=spec.markdown,
        preview=spec.markdown[: settings.preview_chars],
        path=str(path),
        completion_percentage=spec.completion_percentage,
        review_prompt=FollowUpPrompter().quality_prompt(engine.session, spec.markdown),
    )
