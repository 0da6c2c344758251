"""SpecCraft - guided feature specifications.

A questionnaire engine that walks through a catalog of questions about a
software feature, with conditional follow-ups, and renders the answers as a
markdown specification.

Quick Start:
    from speccraft import QuestionnaireEngine, create_specification_from_session

    engine = QuestionnaireEngine.new("Comments", "Let readers comment on posts")
    while (question := engine.get_current_question()) is not None:
        engine.answer_current_question(ask_somehow(question))

    result = create_specification_from_session(engine.session)
    print(result.markdown)

Persistence, the CLI and the MCP server live in ``speccraft.stores``,
``speccraft.cli`` and ``speccraft.mcp_server``.
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("speccraft")
except PackageNotFoundError:
    # Development / source-tree fallback (e.g. running tests without installing the wheel).
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    version = data.get("project", {}).get("version")
                    return str(version) if version is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except (OSError, ValueError):
        __version__ = "unknown"

from speccraft.catalog import BASE_QUESTIONS, QuestionCatalog
from speccraft.engine import QuestionnaireEngine, coerce_answer
from speccraft.exceptions import (
    ConfigError,
    NotFoundError,
    PreconditionError,
    SpecCraftError,
    ValidationError,
)
from speccraft.factory import (
    create_new_questionnaire,
    create_specification_from_session,
    ensure_ready_for_generation,
    validate_specification_completeness,
)
from speccraft.generator import MarkdownGenerator, parse_list_items
from speccraft.models import (
    Answer,
    CompletenessReport,
    DependencyRule,
    GeneratedQuestion,
    Progress,
    Question,
    Session,
    SpecificationResult,
    SpecificationTemplate,
)
from speccraft.prompts import FollowUpPrompter, parse_generated_questions
from speccraft.settings import Settings

__all__ = [
    "__version__",
    # Engine
    "QuestionnaireEngine",
    "QuestionCatalog",
    "BASE_QUESTIONS",
    "coerce_answer",
    # Generation
    "MarkdownGenerator",
    "parse_list_items",
    "create_new_questionnaire",
    "create_specification_from_session",
    "ensure_ready_for_generation",
    "validate_specification_completeness",
    # Prompts
    "FollowUpPrompter",
    "parse_generated_questions",
    # Models
    "Answer",
    "CompletenessReport",
    "DependencyRule",
    "GeneratedQuestion",
    "Progress",
    "Question",
    "Session",
    "SpecificationResult",
    "SpecificationTemplate",
    "Settings",
    # Errors
    "SpecCraftError",
    "ValidationError",
    "NotFoundError",
    "PreconditionError",
    "ConfigError",
]
