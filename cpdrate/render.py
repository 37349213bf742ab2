"""
cpdrate — duplication rate reporter for PMD CPD text reports.

Copyright (c) 2026 cpdrate contributors
Licensed under the MIT License.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from . import ui_messages as ui
from .models import AggregatedRecord, RunSummary
from .scanner import SourceFile, total_lines

RESULT_COLUMNS = (
    "Source",
    "Destination",
    "Lines",
    "Self rate",
    "Duplicated",
    "Destination rate",
)


def fmt_percent(rate: float) -> str:
    return f"{rate * 100:.2f}%"


def _record_row(record: AggregatedRecord) -> tuple[str, ...]:
    destination = record.primary_destination
    return (
        record.source_file.path,
        destination.path if destination is not None else "",
        str(record.source_file.line_count),
        fmt_percent(record.self_duplication_rate),
        str(record.duplicated_lines),
        fmt_percent(record.destination_duplication_rate),
    )


def _rate_style(rate: float) -> str:
    if rate == 0:
        return "dim"
    if rate >= 0.5:
        return "bold red"
    return "bold yellow"


def build_results_table(records: Iterable[AggregatedRecord]) -> Table:
    table = Table(show_header=True, show_lines=False, expand=False)
    for column in RESULT_COLUMNS:
        justify = "left" if column in {"Source", "Destination"} else "right"
        table.add_column(column, justify=justify, overflow="fold")
    for record in records:
        source, destination, lines, self_rate, duplicated, dest_rate = _record_row(
            record
        )
        table.add_row(
            Text(source),
            Text(destination),
            lines,
            Text(self_rate, style=_rate_style(record.self_duplication_rate)),
            duplicated,
            Text(dest_rate, style=_rate_style(record.destination_duplication_rate)),
        )
    return table


def build_files_table(title: str, files: Sequence[SourceFile]) -> Table:
    table = Table(title=title, show_header=True, show_footer=True)
    table.add_column("File", footer=f"{len(files)} files")
    table.add_column("Lines", justify="right", footer=str(total_lines(files)))
    for f in files:
        table.add_row(Text(f.path), str(f.lines))
    return table


def print_report(console: Console, summary: RunSummary) -> None:
    console.print(ui.fmt_results_count(len(summary.records)))
    if summary.records:
        console.print(build_results_table(summary.records.values()))
    console.print(
        ui.fmt_total_rate(fmt_percent(summary.total_destination_rate)),
        highlight=False,
    )
    console.print(
        ui.fmt_total_self_rate(fmt_percent(summary.total_self_rate)),
        highlight=False,
    )


def to_text_report(summary: RunSummary) -> str:
    lines = [ui.fmt_results_count(len(summary.records)), ""]
    lines.append("\t".join(RESULT_COLUMNS))
    for record in summary.records.values():
        lines.append("\t".join(_record_row(record)))
    lines.extend(
        [
            "",
            ui.fmt_total_rate(fmt_percent(summary.total_destination_rate)),
            ui.fmt_total_self_rate(fmt_percent(summary.total_self_rate)),
        ]
    )
    return "\n".join(lines) + "\n"
