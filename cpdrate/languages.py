"""
cpdrate — duplication rate reporter for PMD CPD text reports.

Copyright (c) 2026 cpdrate contributors
Licensed under the MIT License.
"""

from __future__ import annotations

from enum import Enum

from .errors import ValidationError


class Language(str, Enum):
    SWIFT = "swift"
    JAVA = "java"
    HTML = "html"
    KOTLIN = "kotlin"
    RUST = "rust"

    @property
    def cpd_name(self) -> str:
        """Value passed to ``pmd cpd --language``."""
        return self.value

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @classmethod
    def parse(cls, name: str) -> Language:
        try:
            return cls(name.strip().lower())
        except ValueError as e:
            supported = ", ".join(lang.value for lang in cls)
            raise ValidationError(
                f"Unsupported language '{name}' (supported: {supported})"
            ) from e


_EXTENSIONS: dict[Language, str] = {
    Language.SWIFT: "swift",
    Language.JAVA: "java",
    Language.HTML: "html",
    Language.KOTLIN: "kt",
    Language.RUST: "rs",
}

DEFAULT_LANGUAGE = Language.SWIFT
