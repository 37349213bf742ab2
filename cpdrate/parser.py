"""
cpdrate — duplication rate reporter for PMD CPD text reports.

Copyright (c) 2026 cpdrate contributors
Licensed under the MIT License.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from .classifier import FileLocation, match_file_location, match_group_header
from .config import AnalysisConfig
from .counter import LineCounter
from .errors import ReportReadError
from .models import DuplicationGroup, FileLineInfo


def read_report_lines(path: str | Path) -> Iterator[str]:
    """
    Yield the lines of a CPD report without their terminators.

    Lines that are not valid UTF-8 are skipped. Raises ``ReportReadError`` when
    the report cannot be opened.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise ReportReadError(f"Cannot open CPD report '{path}': {e}") from e

    with f:
        for raw in f:
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError:
                continue
            yield text.rstrip("\r\n")


class GroupParser:
    """
    Rebuild duplication groups from the lines of a CPD text report.

    The parser is either idle or inside a group. A header opens a group, a blank
    line closes it; closed groups with a source occurrence are emitted.
    """

    __slots__ = ("config", "line_counter")

    def __init__(self, config: AnalysisConfig, line_counter: LineCounter) -> None:
        self.config = config
        self.line_counter = line_counter

    def parse_lines(self, lines: Iterable[str]) -> Iterator[DuplicationGroup]:
        group: DuplicationGroup | None = None

        for line in lines:
            if group is not None and line == "":
                if group.source is not None:
                    yield group
                group = None
                continue

            declared = match_group_header(line)
            if declared is not None:
                if group is None:
                    group = DuplicationGroup(declared_lines=declared)
                else:
                    group.declared_lines = declared
                continue

            if group is None:
                continue

            location = match_file_location(line)
            if location is not None:
                self._classify(group, location)

    def _classify(self, group: DuplicationGroup, location: FileLocation) -> None:
        path = location.path
        if not path:
            # Present but unusable: neither source nor destination.
            group.clear_destinations()
            return

        occurrence = FileLineInfo(path, self.line_counter.line_count(path))
        if group.source is None and self.config.is_source_path(path):
            group.source = occurrence
        elif self.config.is_destination_path(path):
            group.add_destination(occurrence)
        else:
            group.clear_destinations()


class ReportGroups:
    """Restartable view of the groups in a report file; every pass re-reads it."""

    __slots__ = ("parser", "report_path")

    def __init__(self, parser: GroupParser, report_path: str | Path) -> None:
        self.parser = parser
        self.report_path = report_path

    def __iter__(self) -> Iterator[DuplicationGroup]:
        return self.parser.parse_lines(read_report_lines(self.report_path))
