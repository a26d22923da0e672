"""
Immutable fragments of formatted TypeScript source.

A CodeBlock is built from a format string with placeholders, expanded
eagerly into text:

- %L: a literal, emitted as-is (a CodeBlock contributes its text)
- %S: a string, emitted as a single-quoted TypeScript string literal
- %T: a type, emitted as its reference
- %N: a name, taken from the argument's `name` attribute
- %%: a literal percent sign
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable

from .type_names import TypeName

_PLACEHOLDER_PATTERN = re.compile(r"%(.)", re.DOTALL)


def string_literal(value: str) -> str:
    """Quote a Python string as a TypeScript string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f"'{escaped}'"


def _format_arg(kind: str, arg: Any) -> str:
    if kind == "L":
        return str(arg)
    if kind == "S":
        return "null" if arg is None else string_literal(str(arg))
    if kind == "T":
        if isinstance(arg, (TypeName, str)):
            return str(arg)
        raise ValueError(f"Expected a type for %T but got {arg!r}")
    if kind == "N":
        if isinstance(arg, str):
            return arg
        if hasattr(arg, "name"):
            return arg.name
        raise ValueError(f"Expected a name for %N but got {arg!r}")
    raise ValueError(f"Unknown placeholder %{kind}")


def format_code(format: str, *args: Any) -> str:
    """Expand placeholders in `format` with `args`."""
    remaining = list(args)
    consumed = 0

    def replace(match: re.Match) -> str:
        nonlocal consumed
        kind = match.group(1)
        if kind == "%":
            return "%"
        if consumed >= len(remaining):
            raise ValueError(f"Not enough arguments for format {format!r}")
        value = _format_arg(kind, remaining[consumed])
        consumed += 1
        return value

    text = _PLACEHOLDER_PATTERN.sub(replace, format)
    if consumed != len(remaining):
        raise ValueError(f"Unused arguments for format {format!r}: expected {consumed}, got {len(remaining)}")
    return text


@dataclass(frozen=True)
class CodeBlock:
    """An immutable piece of formatted code."""

    text: str = ""

    @staticmethod
    def empty() -> CodeBlock:
        return CodeBlock()

    @staticmethod
    def of(format: str, *args: Any) -> CodeBlock:
        return CodeBlock(format_code(format, *args))

    @staticmethod
    def join_to_code(blocks: Iterable[CodeBlock], separator: str = ", ", prefix: str = "", suffix: str = "") -> CodeBlock:
        """Join blocks with `separator`; prefix and suffix are only added when there is something to join."""
        blocks = list(blocks)
        if not blocks:
            return CodeBlock.empty()
        return CodeBlock(prefix + separator.join(b.text for b in blocks) + suffix)

    def add(self, format: str, *args: Any) -> CodeBlock:
        return CodeBlock(self.text + format_code(format, *args))

    def add_code(self, block: CodeBlock) -> CodeBlock:
        return CodeBlock(self.text + block.text)

    def add_statement(self, format: str, *args: Any) -> CodeBlock:
        return CodeBlock(self.text + format_code(format, *args) + ";\n")

    def is_empty(self) -> bool:
        return not self.text

    def is_not_empty(self) -> bool:
        return bool(self.text)

    def remove(self, pattern: re.Pattern | str) -> CodeBlock:
        """Return a block with every match of `pattern` removed.

        If the pattern defines a group named `keep`, the text it matched
        is put back in place of the removed match.
        """
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        replacement = r"\g<keep>" if "keep" in pattern.groupindex else ""
        return CodeBlock(pattern.sub(replacement, self.text))

    def __str__(self) -> str:
        return self.text
