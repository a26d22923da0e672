"""
Generate a TypeScript source file from a class document.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

from . import __version__
from .cli_utils import reconstruct_command_line
from .code_writer import CodeWriter
from .config import CodeWriterConfig
from .loader import load_class_specs

logger = logging.getLogger(__name__)

CURRENT_DIR = Path(__file__).parent


class ClassFileGenerator:
    """Renders every class of a document into one TypeScript file."""

    def __init__(self, name: str | None, document: dict[str, Any], config: CodeWriterConfig | None = None):
        self.name = name
        self.config = config or CodeWriterConfig()
        self.class_specs = load_class_specs(document)

        self.jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True)
        with open(CURRENT_DIR / "templates" / "prefix.ts.jinja2", encoding="utf-8") as f:
            self.prefix = self.jinja_env.from_string(f.read())

    def _command_line(self) -> str:
        from .ts_class_spec import ts_class_spec as click_command  # noqa

        return reconstruct_command_line(click_command)

    def generate(self) -> str:
        prefix = self.prefix.render(
            generation_comment=self.config.add_generation_comment,
            version=__version__,
            command_line=self._command_line() if self.config.add_generation_comment else "",
            name=self.name,
        )

        writer = CodeWriter(self.config)
        for index, class_spec in enumerate(self.class_specs):
            if index > 0:
                writer.emit("\n" * self.config.class_separator)
            class_spec.emit(writer)

        logger.info("Generated %d classes for %s", len(self.class_specs), self.name or "<document>")
        return prefix + writer.to_string()
