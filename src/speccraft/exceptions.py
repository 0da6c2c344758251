# src/speccraft/exceptions.py
"""Exceptions raised by the questionnaire engine and specification factory."""

from __future__ import annotations


class SpecCraftError(Exception):
    """Base class for all SpecCraft domain errors."""


class ValidationError(SpecCraftError):
    """Raised when an answer cannot be recorded.

    Attributes:
        question_id: The question the rejected answer was meant for, if any.
    """

    def __init__(self, message: str, question_id: str | None = None) -> None:
        super().__init__(message)
        self.question_id = question_id


class NotFoundError(SpecCraftError):
    """Raised when a session or question id does not exist.

    Attributes:
        kind: What was looked up ("session" or "question").
        identifier: The id that could not be resolved.
    """

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(f"{kind.capitalize()} {identifier} not found")
        self.kind = kind
        self.identifier = identifier


class PreconditionError(SpecCraftError):
    """Raised when an operation needs a state the session has not reached yet.

    Attributes:
        completion_percentage: How far along the questionnaire is.
        missing: Text of required questions that still have no answer.
    """

    def __init__(
        self,
        message: str,
        completion_percentage: int = 0,
        missing: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.completion_percentage = completion_percentage
        self.missing = missing or []


class ConfigError(SpecCraftError):
    """Raised when the configuration names an unknown store or invalid settings."""
