"""
Writer that turns specs into indented TypeScript source.

Indentation is applied lazily: the indent prefix is written at the start
of every non-blank line, so callers only ever emit raw text and newlines.
"""

from __future__ import annotations

from typing import Any, Iterable

from .code_block import CodeBlock, format_code
from .config import CodeWriterConfig
from .decorator_spec import DecoratorSpec
from .modifier import Modifier, sort_modifiers
from .type_names import TypeVariable


class CodeWriter:
    """Accumulates emitted code. Not safe for concurrent use."""

    def __init__(self, config: CodeWriterConfig | None = None):
        self.config = config or CodeWriterConfig()
        self._parts: list[str] = []
        self._indent_level = 0
        self._at_line_start = True

    def emit(self, text: str) -> CodeWriter:
        for index, line in enumerate(text.split("\n")):
            if index > 0:
                self._parts.append("\n")
                self._at_line_start = True
            if not line:
                continue
            if self._at_line_start:
                self._parts.append(self.config.indent * self._indent_level)
                self._at_line_start = False
            self._parts.append(line)
        return self

    def emit_code(self, format: str, *args: Any) -> CodeWriter:
        return self.emit(format_code(format, *args))

    def emit_code_block(self, block: CodeBlock, ensure_trailing_newline: bool = False) -> CodeWriter:
        self.emit(block.text)
        if ensure_trailing_newline and block.is_not_empty() and not block.text.endswith("\n"):
            self.emit("\n")
        return self

    def emit_doc_comment(self, doc: CodeBlock) -> CodeWriter:
        if doc.is_empty():
            return self
        self.emit("/**\n")
        for line in doc.text.rstrip("\n").split("\n"):
            self.emit(f" * {line}".rstrip() + "\n")
        self.emit(" */\n")
        return self

    def emit_decorators(self, decorators: Iterable[DecoratorSpec], inline: bool) -> CodeWriter:
        for decorator in decorators:
            self.emit_code_block(decorator.to_code())
            self.emit(" " if inline else "\n")
        return self

    def emit_modifiers(self, modifiers: Iterable[Modifier], implicit_modifiers: Iterable[Modifier] = ()) -> CodeWriter:
        """Emit modifiers in canonical order, skipping those that are implied by context."""
        implicit = set(implicit_modifiers)
        for modifier in sort_modifiers(modifiers):
            if modifier in implicit:
                continue
            self.emit(modifier.value)
            self.emit(" ")
        return self

    def emit_type_variables(self, type_variables: Iterable[TypeVariable]) -> CodeWriter:
        type_variables = list(type_variables)
        if not type_variables:
            return self
        self.emit("<")
        self.emit(", ".join(tv.bound_reference() for tv in type_variables))
        self.emit(">")
        return self

    def indent(self, levels: int = 1) -> CodeWriter:
        self._indent_level += levels
        return self

    def unindent(self, levels: int = 1) -> CodeWriter:
        if self._indent_level - levels < 0:
            raise ValueError(f"Cannot unindent {levels} from {self._indent_level}")
        self._indent_level -= levels
        return self

    def to_string(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.to_string()
