"""
cpdrate — duplication rate reporter for PMD CPD text reports.

Copyright (c) 2026 cpdrate contributors
Licensed under the MIT License.
"""


class CpdRateError(Exception):
    """Base exception for cpdrate."""


class ValidationError(CpdRateError):
    """Input validation failed."""


class ToolUnavailableError(CpdRateError):
    """PMD could not be located or installed."""


class ToolExecutionError(CpdRateError):
    """PMD CPD exited with an unexpected status."""

    __slots__ = ("status",)

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class ReportReadError(CpdRateError):
    """The persisted CPD report could not be opened."""


class ReportWriteError(CpdRateError):
    """The CPD report could not be persisted."""
