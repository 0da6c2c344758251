# src/speccraft/generator/markdown.py
"""Render collected answers into a markdown feature specification.

The generator reads answers by the well-known question ids of the built-in
catalog. Free-text answers that look like lists ("a, b" or one item per
line) are split into items with ``parse_list_items`` so that both input
styles render as the same bullet list.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date

from speccraft.models import Answer, SpecificationTemplate

DEFAULT_BENEFIT = "I can achieve my goals"
NO_AUTHENTICATION = "No authentication needed"

STANDARD_ACCEPTANCE_CRITERIA = (
    "All user stories must be implemented and tested",
    "Feature must pass all security and performance requirements",
    "User interface must be responsive and accessible",
)

_DELIMITERS = re.compile(r"[,\n]")
_BULLET_PREFIX = re.compile(r"^[-•*]\s*")


def parse_list_items(content: str) -> list[str]:
    """Split free text on commas and newlines into trimmed items.

    Empty items are dropped and a leading ``-``, ``•`` or ``*`` bullet is
    stripped from each. Commas inside a sentence split it too:
    "must be 18, verified" yields two items.
    """
    if not content:
        return []
    items = [item.strip() for item in _DELIMITERS.split(content)]
    return [_BULLET_PREFIX.sub("", item) for item in items if item]


def stringify_value(value: str | bool | list[str]) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ", ".join(value)
    return str(value)


class MarkdownGenerator:
    """Builds the specification document and template from a set of answers."""

    def __init__(self, answers: Iterable[Answer]) -> None:
        self._answers: dict[str, Answer] = {a.question_id: a for a in answers}

    def _value(self, question_id: str) -> str:
        answer = self._answers.get(question_id)
        if answer is None:
            return ""
        return stringify_value(answer.value)

    # Section items

    def user_stories(self) -> list[str]:
        """One story per (user, function) pair; every user gets every function."""
        target_users = self._value("target-users")
        core_function = self._value("core-functionality")
        benefit = self._value("business-value") or DEFAULT_BENEFIT

        stories: list[str] = []
        if target_users and core_function:
            for user in parse_list_items(target_users):
                for function in parse_list_items(core_function):
                    stories.append(
                        f"As a {user.lower()}, I want {function.lower()} so that {benefit}."
                    )

        if not stories and core_function:
            for function in parse_list_items(core_function):
                stories.append(f"As a user, I want {function.lower()} so that {benefit}.")

        return stories

    def functional_requirements(self) -> list[str]:
        requirements = [
            f"The system must {f.lower()}"
            for f in parse_list_items(self._value("core-functionality"))
        ]
        if interactions := self._value("user-interactions"):
            requirements.append(f"User interaction flow: {interactions}")
        if data := self._value("data-requirements"):
            requirements.append(f"Data requirements: {data}")
        if integrations := self._value("integrations-needed"):
            requirements.append(f"External integrations: {integrations}")
        return requirements

    def edge_cases(self) -> list[str]:
        cases = [
            f"Error handling: {e}" for e in parse_list_items(self._value("error-scenarios"))
        ]
        cases.extend(parse_list_items(self._value("edge-cases")))
        if rules := self._value("validation-rules"):
            cases.append(f"Input validation: {rules}")
        return cases

    def ui_ux_requirements(self) -> list[str]:
        requirements: list[str] = []
        if ui := self._value("ui-requirements"):
            requirements.append(ui)
        if self._value("responsive-design") == "true":
            requirements.append("Must be responsive and work on mobile devices")
        if accessibility := self._value("accessibility-requirements"):
            requirements.append(f"Accessibility requirements: {accessibility}")
        return requirements

    def technical_constraints(self) -> list[str]:
        constraints: list[str] = []
        if performance := self._value("performance-requirements"):
            constraints.append(f"Performance: {performance}")
        if scalability := self._value("scalability-needs"):
            constraints.append(f"Scalability: {scalability}")
        authentication = self._value("authentication-required")
        if authentication and authentication != NO_AUTHENTICATION:
            constraints.append(f"Authentication: {authentication}")
        if security := self._value("security-requirements"):
            constraints.append(f"Security: {security}")
        return constraints

    def acceptance_criteria(self) -> list[str]:
        """Answer-derived criteria followed by the standard ones, which are always present."""
        criteria = [
            f"Success measure: {s}" for s in parse_list_items(self._value("success-criteria"))
        ]
        criteria.extend(
            f"Feature must successfully {f.lower()}"
            for f in parse_list_items(self._value("core-functionality"))
        )
        criteria.extend(STANDARD_ACCEPTANCE_CRITERIA)
        return criteria

    def dependencies(self) -> list[str]:
        dependencies: list[str] = []
        if features := self._value("feature-dependencies"):
            dependencies.append(f"Feature dependencies: {features}")
        if integrations := self._value("integrations-needed"):
            dependencies.append(f"External service dependencies: {integrations}")
        if timeline := self._value("timeline-constraints"):
            dependencies.append(f"Timeline constraints: {timeline}")
        return dependencies

    # Output

    @staticmethod
    def _section(title: str, body: str) -> str:
        if not body.strip():
            return ""
        return f"## {title}\n\n{body.strip()}\n\n"

    @staticmethod
    def _bullets(items: list[str]) -> str:
        return "\n".join(f"- {item}" for item in items)

    def generate_markdown(self, feature_title: str, generated_on: date | None = None) -> str:
        """Render the full document.

        Sections with no content are left out entirely.

        Args:
            feature_title: Used for the H1 heading.
            generated_on: Date for the footer (default: today).
        """
        generated_on = generated_on or date.today()

        parts = [
            f"# Feature: {feature_title}\n\n",
            self._section("Overview", self._value("feature-overview")),
            self._section("User Stories", self._bullets(self.user_stories())),
            self._section(
                "Functional Requirements", self._bullets(self.functional_requirements())
            ),
            self._section("Edge Cases", self._bullets(self.edge_cases())),
            self._section("UI/UX Requirements", "\n\n".join(self.ui_ux_requirements())),
            self._section("Technical Constraints", self._bullets(self.technical_constraints())),
            self._section("Acceptance Criteria", self._bullets(self.acceptance_criteria())),
            self._section("Dependencies", self._bullets(self.dependencies())),
            "---\n\n",
            f"*Generated by SpecCraft on {generated_on.isoformat()}*\n",
        ]
        return "".join(parts)

    def generate_specification_template(self) -> SpecificationTemplate:
        """The same content as ``generate_markdown`` with one plain list per section."""
        return SpecificationTemplate(
            overview=self._value("feature-overview"),
            user_stories=self.user_stories(),
            functional_requirements=self.functional_requirements(),
            edge_cases=self.edge_cases(),
            ui_ux_requirements=self.ui_ux_requirements(),
            technical_constraints=self.technical_constraints(),
            acceptance_criteria=self.acceptance_criteria(),
            dependencies=self.dependencies(),
        )
