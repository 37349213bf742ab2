"""
cpdrate — duplication rate reporter for PMD CPD text reports.

Copyright (c) 2026 cpdrate contributors
Licensed under the MIT License.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final

REPORT_FILENAME: Final = "report.txt"
DEFAULT_MINIMUM_TOKENS: Final = 50

CPD_STATUS_NO_DUPLICATES: Final = 0
CPD_STATUS_DUPLICATES_FOUND: Final = 4


class ExitCode(IntEnum):
    SUCCESS = 0
    CONTRACT_ERROR = 2
    TOOL_ERROR = 3
    INTERNAL_ERROR = 5


PMD_INSTALL_URL: Final = (
    "https://docs.pmd-code.org/latest/pmd_userdocs_installation.html"
)

EXIT_CODE_DESCRIPTIONS: Final[tuple[tuple[ExitCode, str], ...]] = (
    (ExitCode.SUCCESS, "success (including: no duplications found)"),
    (
        ExitCode.CONTRACT_ERROR,
        "contract error (invalid arguments, unreadable CPD report)",
    ),
    (
        ExitCode.TOOL_ERROR,
        "tool error (PMD unavailable or CPD exited with an unexpected status)",
    ),
    (
        ExitCode.INTERNAL_ERROR,
        "internal error (unexpected exception; please report)",
    ),
)


def cli_help_epilog() -> str:
    lines = ["Exit codes"]
    for code, description in EXIT_CODE_DESCRIPTIONS:
        lines.append(f"  - {int(code)} - {description}")
    lines.extend(
        [
            "",
            f"PMD installation: {PMD_INSTALL_URL}",
        ]
    )
    return "\n".join(lines)
