# src/speccraft/settings.py
"""Behavioral settings for SpecCraft.

Settings are passed programmatically; the library does not read environment
variables. The CLI and protocol server read ``speccraft.yaml`` and
``SPECCRAFT_*`` variables at the application layer (see ``speccraft.config``)
and build a Settings instance from them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Behavioral settings for SpecCraft.

    Example:
        settings = Settings(max_follow_up_questions=5, specs_dir="docs/specs")
    """

    # Follow-up question prompts
    max_follow_up_questions: int = Field(default=3, ge=1)

    # Characters of generated markdown shown in previews
    preview_chars: int = Field(default=500, ge=0)

    # Where generated specifications are written
    specs_dir: str = "specs"
