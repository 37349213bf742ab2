"""
cpdrate — duplication rate reporter for PMD CPD text reports.

Copyright (c) 2026 cpdrate contributors
Licensed under the MIT License.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from .config import AnalysisConfig
from .contracts import (
    CPD_STATUS_DUPLICATES_FOUND,
    CPD_STATUS_NO_DUPLICATES,
    PMD_INSTALL_URL,
)
from .errors import ReportWriteError, ToolExecutionError, ToolUnavailableError

PMD_EXECUTABLE = "pmd"
INSTALL_COMMAND = ("brew", "install", "pmd")


def _install_failed_message() -> str:
    return (
        f"Install '{PMD_EXECUTABLE}' failed, please install it manually. "
        f"See: {PMD_INSTALL_URL}"
    )


def install_pmd() -> None:
    try:
        proc = subprocess.run(list(INSTALL_COMMAND), capture_output=True)
    except OSError as e:
        raise ToolUnavailableError(_install_failed_message()) from e
    if proc.returncode != 0:
        raise ToolUnavailableError(_install_failed_message())


def pmd_available(executable: str = PMD_EXECUTABLE) -> bool:
    return shutil.which(executable) is not None


def build_cpd_command(
    config: AnalysisConfig, executable: str = PMD_EXECUTABLE
) -> list[str]:
    return [
        executable,
        "cpd",
        "--minimum-tokens",
        str(config.minimum_tokens),
        "-d",
        config.root,
        "--language",
        config.language.cpd_name,
    ]


def run_cpd(config: AnalysisConfig, executable: str = PMD_EXECUTABLE) -> Path | None:
    """
    Run PMD CPD over ``config.root``.

    Returns None when CPD reports no duplications, otherwise the path of the
    text report written to ``<root>/report.txt``.
    """
    cmd = build_cpd_command(config, executable)
    try:
        proc = subprocess.run(cmd, capture_output=True)
    except OSError as e:
        raise ToolExecutionError(f"Failed to execute {executable}: {e}") from e

    if proc.returncode == CPD_STATUS_NO_DUPLICATES:
        return None
    if proc.returncode != CPD_STATUS_DUPLICATES_FOUND:
        raise ToolExecutionError(
            f"{executable} cpd exited with an exception (status {proc.returncode})",
            status=proc.returncode,
        )

    report_path = Path(config.report_path)
    try:
        report_path.write_bytes(proc.stdout)
    except OSError as e:
        raise ReportWriteError(
            f"Cannot write CPD report to '{report_path}': {e}"
        ) from e
    return report_path
