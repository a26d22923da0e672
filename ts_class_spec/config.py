"""
Configuration for code writing and file generation.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CodeWriterConfig:
    """Configuration options for emitting TypeScript source."""

    # String used for one level of indentation
    indent: str = "  "

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Blank lines between classes in a generated file
    class_separator: int = 1

    @staticmethod
    def from_dict(d: dict) -> CodeWriterConfig:
        """Create a config from a dictionary."""
        config = CodeWriterConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "indent": self.indent,
            "add_generation_comment": self.add_generation_comment,
            "class_separator": self.class_separator,
        }
