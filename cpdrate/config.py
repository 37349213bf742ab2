"""
cpdrate — duplication rate reporter for PMD CPD text reports.

Copyright (c) 2026 cpdrate contributors
Licensed under the MIT License.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import PurePath

from .contracts import DEFAULT_MINIMUM_TOKENS, REPORT_FILENAME
from .errors import ValidationError
from .languages import DEFAULT_LANGUAGE, Language


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """
    Settings for one run, built once by the CLI.

    Key semantics:
    - source_dir: a report path belongs to the source set when it contains this
      string
    - destination_dir: only its final segment is used; a report path belongs to
      the destination set when one of its directories has exactly that name
    """

    root: str
    source_dir: str
    destination_dir: str
    language: Language = DEFAULT_LANGUAGE
    minimum_tokens: int = DEFAULT_MINIMUM_TOKENS
    ignore_blank: bool = True

    @property
    def source_identifier(self) -> str:
        return self.source_dir.rstrip("/" + os.sep) or self.source_dir

    @property
    def destination_segment(self) -> str:
        return PurePath(self.destination_dir).name

    @property
    def report_path(self) -> str:
        return os.path.join(self.root, REPORT_FILENAME)

    def is_source_path(self, path: str) -> bool:
        return bool(path) and self.source_identifier in path

    def is_destination_path(self, path: str) -> bool:
        if not path:
            return False
        return self.destination_segment in PurePath(path).parts[:-1]

    def validate(self) -> None:
        if not self.root:
            raise ValidationError("Root path must not be empty.")
        if not self.source_identifier:
            raise ValidationError("Source directory must not be empty.")
        if not self.destination_segment:
            raise ValidationError(
                f"Destination directory has no final path segment: "
                f"'{self.destination_dir}'"
            )
        if self.minimum_tokens <= 0:
            raise ValidationError(
                f"Minimum tokens must be a positive integer, "
                f"got {self.minimum_tokens}."
            )
