"""
TypeScript modifier keywords.
"""

from __future__ import annotations

from enum import Enum


class Modifier(str, Enum):
    """TypeScript modifiers, declared in the order they must appear in source."""

    EXPORT = "export"
    DECLARE = "declare"
    DEFAULT = "default"
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    STATIC = "static"
    ABSTRACT = "abstract"
    READONLY = "readonly"
    ASYNC = "async"
    CONST = "const"

    @staticmethod
    def from_keyword(keyword: str) -> Modifier:
        """Look up a modifier by its source keyword (e.g. "readonly")."""
        try:
            return Modifier(keyword)
        except ValueError:
            raise ValueError(f"Unknown modifier: {keyword!r}") from None


# Visibility modifiers; at most one applies to a member
ACCESS_MODIFIERS = frozenset({Modifier.PUBLIC, Modifier.PROTECTED, Modifier.PRIVATE})

# Modifiers that turn a constructor parameter into a class field
FIELD_MODIFIERS = frozenset({Modifier.PUBLIC, Modifier.PROTECTED, Modifier.PRIVATE, Modifier.READONLY})


def sort_modifiers(modifiers) -> list[Modifier]:
    """Deduplicate modifiers and put them in canonical source order."""
    order = list(Modifier)
    return sorted(set(modifiers), key=order.index)
