from __future__ import annotations

import os
import sys
import time
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import NoReturn

from rich.console import Console
from rich.panel import Panel
from rich.theme import Theme

from . import __version__
from . import ui_messages as ui
from ._cli_args import build_parser
from .aggregator import aggregate, summarize
from .config import AnalysisConfig
from .contracts import ExitCode
from .counter import LineCounter
from .errors import (
    ReportReadError,
    ReportWriteError,
    ToolExecutionError,
    ToolUnavailableError,
    ValidationError,
)
from .languages import Language
from .models import RunSummary
from .parser import GroupParser, ReportGroups
from .render import build_files_table, print_report, to_text_report
from .runner import install_pmd, pmd_available, run_cpd
from .scanner import SourceFile, scan_sources

custom_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "dim": "dim",
    }
)


def _make_console(*, no_color: bool) -> Console:
    return Console(theme=custom_theme, width=200, no_color=no_color)


console = _make_console(no_color=False)


def expand_path(p: str) -> Path:
    return Path(p).expanduser().resolve()


def absolute_path(p: str) -> Path:
    return Path(p).expanduser().absolute()


def print_banner() -> None:
    console.print(
        Panel(
            ui.banner_title(__version__),
            border_style="blue",
            padding=(0, 2),
            expand=False,
        )
    )


def _is_debug_enabled(
    *,
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> bool:
    args = list(sys.argv[1:] if argv is None else argv)
    debug_from_flag = any(arg == "--debug" for arg in args)
    env = os.environ if environ is None else environ
    debug_from_env = env.get("CPDRATE_DEBUG") == "1"
    return debug_from_flag or debug_from_env


def _contract_error(message: str) -> NoReturn:
    console.print(ui.fmt_contract_error(message))
    sys.exit(ExitCode.CONTRACT_ERROR)


def _tool_error(message: str) -> NoReturn:
    console.print(ui.fmt_tool_error(message))
    sys.exit(ExitCode.TOOL_ERROR)


def build_config(
    *,
    root: Path,
    source: str,
    destination: str,
    language: str,
    minimum_tokens: int,
    count_blank: bool,
) -> AnalysisConfig:
    config = AnalysisConfig(
        root=str(root),
        source_dir=str(absolute_path(source)),
        destination_dir=str(absolute_path(destination)),
        language=Language.parse(language),
        minimum_tokens=minimum_tokens,
        ignore_blank=not count_blank,
    )
    config.validate()
    return config


def _scan_tree(config: AnalysisConfig, directory: str) -> list[SourceFile]:
    files = scan_sources(
        directory, [config.language], ignore_blank=config.ignore_blank
    )
    if not files:
        console.print(
            ui.fmt_empty_tree(language=config.language.value, path=Path(directory))
        )
    return files


def analyze_report(
    config: AnalysisConfig,
    report_path: Path,
) -> tuple[RunSummary, list[SourceFile], list[SourceFile]]:
    parser = GroupParser(config, LineCounter(ignore_blank=config.ignore_blank))
    records = aggregate(ReportGroups(parser, report_path))

    destination_files = _scan_tree(config, config.destination_dir)
    source_files = _scan_tree(config, config.source_dir)
    summary = summarize(
        records,
        destination_file_count=len(destination_files),
        source_file_count=len(source_files),
    )
    return summary, source_files, destination_files


def _obtain_report(config: AnalysisConfig, *, quiet: bool) -> Path | None:
    if not pmd_available():
        console.print(ui.INFO_INSTALLING_PMD)
        install_pmd()

    if quiet:
        report_path = run_cpd(config)
    else:
        with console.status(ui.STATUS_RUNNING_CPD, spinner="dots"):
            report_path = run_cpd(config)

    if report_path is not None and not quiet:
        console.print(ui.fmt_path(ui.INFO_REPORT_SAVED, report_path))
    return report_path


def _main_impl() -> None:
    ap = build_parser(__version__)
    args = ap.parse_args()

    global console
    console = _make_console(no_color=args.no_color)

    t0 = time.monotonic()

    if not args.quiet:
        print_banner()

    root_path = expand_path(args.root)
    if not root_path.exists():
        _contract_error(ui.ERR_ROOT_NOT_FOUND.format(path=root_path))

    try:
        config = build_config(
            root=root_path,
            source=args.source,
            destination=args.destination,
            language=args.language,
            minimum_tokens=args.minimum_tokens,
            count_blank=args.count_blank,
        )
    except ValidationError as e:
        _contract_error(str(e))

    if not args.quiet:
        console.print(ui.fmt_scanning_root(root_path))

    if args.report:
        report_path: Path | None = expand_path(args.report)
    else:
        try:
            report_path = _obtain_report(config, quiet=args.quiet)
        except (ToolUnavailableError, ToolExecutionError) as e:
            _tool_error(str(e))
        except ReportWriteError as e:
            _contract_error(str(e))

    if report_path is None:
        console.print(ui.SUCCESS_NO_DUPLICATES)
        return

    try:
        if args.quiet:
            summary, source_files, destination_files = analyze_report(
                config, report_path
            )
        else:
            with console.status(ui.STATUS_PARSING, spinner="dots"):
                summary, source_files, destination_files = analyze_report(
                    config, report_path
                )
    except ReportReadError as e:
        _contract_error(str(e))

    if args.show_files:
        console.print(build_files_table(ui.FILES_TITLE_SOURCE, source_files))
        console.print(
            build_files_table(ui.FILES_TITLE_DESTINATION, destination_files)
        )

    print_report(console, summary)

    if args.text_out:
        out = expand_path(args.text_out)
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(to_text_report(summary), "utf-8")
        except OSError as e:
            _contract_error(
                ui.fmt_report_write_failed(label="text", path=out, error=e)
            )
        if not args.quiet:
            console.print(ui.fmt_path(ui.INFO_TEXT_REPORT_SAVED, out))

    if not args.quiet:
        elapsed = time.monotonic() - t0
        console.print(f"\n[dim]Done in {elapsed:.1f}s[/dim]")


def main() -> None:
    try:
        _main_impl()
    except SystemExit:
        raise
    except Exception as e:
        console.print(
            ui.fmt_internal_error(
                e,
                debug=_is_debug_enabled(),
            )
        )
        sys.exit(ExitCode.INTERNAL_ERROR)


if __name__ == "__main__":
    main()
