# src/speccraft/generator/__init__.py
"""Specification document generation."""

from speccraft.generator.markdown import (
    STANDARD_ACCEPTANCE_CRITERIA,
    MarkdownGenerator,
    parse_list_items,
    stringify_value,
)

__all__ = [
    "MarkdownGenerator",
    "STANDARD_ACCEPTANCE_CRITERIA",
    "parse_list_items",
    "stringify_value",
]
