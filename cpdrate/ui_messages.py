from __future__ import annotations

import platform
import shlex
import sys
import traceback
from pathlib import Path

from . import __version__

BANNER_SUBTITLE = "[italic]Duplication rates from PMD CPD reports[/italic]"

MARKER_CONTRACT_ERROR = "[error]CONTRACT ERROR:[/error]"
MARKER_TOOL_ERROR = "[error]TOOL ERROR:[/error]"
MARKER_INTERNAL_ERROR = "[error]INTERNAL ERROR:[/error]"

HELP_VERSION = "Print the cpdrate version and exit."
HELP_ROOT = "Root directory passed to PMD CPD; report.txt is written here."
HELP_SOURCE = "Source code directory whose files are measured."
HELP_DESTINATION = "Source code directory compared against."
HELP_LANGUAGE = "Source code language."
HELP_MINIMUM_TOKENS = "Minimum token length which should be reported as a duplicate."
HELP_REPORT = "Analyze an existing CPD text report instead of running PMD."
HELP_COUNT_BLANK = "Count blank lines when measuring file sizes."
HELP_SHOW_FILES = "Print the scanned source and destination files."
HELP_TEXT = "Also write the results as a text report to FILE."
HELP_NO_COLOR = "Disable ANSI colors in output."
HELP_QUIET = "Minimize output (still shows warnings and errors)."
HELP_DEBUG = "Print debug details (traceback and environment) on internal errors."

RESULTS_COUNT = "Found {count} results:"
TOTAL_RATE = "Total rate: {rate}"
TOTAL_SELF_RATE = "Total rate of self: {rate}"
FILES_TITLE_SOURCE = "Source files"
FILES_TITLE_DESTINATION = "Destination files"

STATUS_RUNNING_CPD = "[bold green]Running PMD CPD..."
STATUS_PARSING = "[bold green]Parsing CPD report..."

INFO_SCANNING_ROOT = "[info]Scanning root:[/info] {root}"
INFO_INSTALLING_PMD = "[info]Installing pmd...[/info]"
INFO_REPORT_SAVED = "[info]CPD report saved:[/info] {path}"
INFO_TEXT_REPORT_SAVED = "[info]Text report saved:[/info] {path}"
SUCCESS_NO_DUPLICATES = (
    "[success]Everything is fine, no code duplications found.[/success]"
)

WARN_EMPTY_TREE = "[warning]No {language} files found under {path}.[/warning]"

ERR_ROOT_NOT_FOUND = "[error]Root path does not exist: {path}[/error]"
ERR_REPORT_WRITE_FAILED = (
    "[error]Failed to write {label} report: {path} ({error}).[/error]"
)


def version_output(version: str) -> str:
    return f"cpdrate {version}"


def banner_title(version: str) -> str:
    return f"[bold white]cpdrate[/bold white] [dim]v{version}[/dim]\n{BANNER_SUBTITLE}"


def fmt_results_count(count: int) -> str:
    return RESULTS_COUNT.format(count=count)


def fmt_total_rate(rate: str) -> str:
    return TOTAL_RATE.format(rate=rate)


def fmt_total_self_rate(rate: str) -> str:
    return TOTAL_SELF_RATE.format(rate=rate)


def fmt_scanning_root(root: Path) -> str:
    return INFO_SCANNING_ROOT.format(root=root)


def fmt_empty_tree(*, language: str, path: Path) -> str:
    return WARN_EMPTY_TREE.format(language=language, path=path)


def fmt_report_write_failed(*, label: str, path: Path, error: object) -> str:
    return ERR_REPORT_WRITE_FAILED.format(label=label, path=path, error=error)


def fmt_path(template: str, path: Path) -> str:
    return template.format(path=path)


def fmt_contract_error(message: str) -> str:
    return f"{MARKER_CONTRACT_ERROR}\n{message}"


def fmt_tool_error(message: str) -> str:
    return f"{MARKER_TOOL_ERROR}\n{message}"


def fmt_internal_error(
    error: BaseException,
    *,
    debug: bool = False,
) -> str:
    error_name = type(error).__name__
    error_text = str(error).strip() or "<no message>"
    lines = [
        MARKER_INTERNAL_ERROR,
        "Unexpected exception.",
        f"Reason: {error_name}: {error_text}",
        "",
        "Next steps:",
        "- Re-run with --debug to include a traceback.",
        "- Attach: command line, cpdrate version, PMD version, and report.txt.",
    ]
    if not debug:
        return "\n".join(lines)

    traceback_lines = traceback.format_exception(
        type(error), error, error.__traceback__
    )
    lines.extend(
        [
            "",
            "DEBUG DETAILS",
            f"Platform: {platform.platform()}",
            f"Python: {sys.version.split()[0]}",
            f"cpdrate: {__version__}",
            f"Command: {shlex.join(sys.argv)}",
            f"CWD: {Path.cwd()}",
            "Traceback:",
            "".join(traceback_lines).rstrip(),
        ]
    )
    return "\n".join(lines)
