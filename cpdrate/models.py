"""
cpdrate — duplication rate reporter for PMD CPD text reports.

Copyright (c) 2026 cpdrate contributors
Licensed under the MIT License.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class FileLineInfo:
    """A file referenced by the report and its total line count on disk."""

    path: str
    line_count: int


@dataclass(slots=True)
class DuplicationGroup:
    """
    One clone instance reported by CPD.

    ``declared_lines`` is the size claimed by the group header. ``source`` is the
    first occurrence inside the source directory, ``destinations`` the following
    occurrences inside the destination directory, in report order.
    """

    declared_lines: int
    source: FileLineInfo | None = None
    destinations: list[FileLineInfo] = field(default_factory=list)

    def add_destination(self, destination: FileLineInfo) -> None:
        self.destinations.append(destination)

    def clear_destinations(self) -> None:
        self.destinations.clear()


def _clamped_rate(numerator: int, denominator: int) -> float:
    if denominator <= 0:
        return 1.0 if numerator > 0 else 0.0
    return min(1.0, numerator / denominator)


@dataclass(slots=True)
class AggregatedRecord:
    source_file: FileLineInfo
    primary_destination: FileLineInfo | None
    duplicated_lines: int

    def add_lines(self, lines: int) -> None:
        self.duplicated_lines += lines

    @property
    def self_duplication_rate(self) -> float:
        return _clamped_rate(self.duplicated_lines, self.source_file.line_count)

    @property
    def destination_duplication_rate(self) -> float:
        # Denominator is the first destination only, even when later groups
        # matched other destination files.
        if self.primary_destination is None:
            return 0.0
        return _clamped_rate(
            self.duplicated_lines, self.primary_destination.line_count
        )


@dataclass(frozen=True, slots=True)
class RunSummary:
    records: dict[str, AggregatedRecord]
    destination_file_count: int
    source_file_count: int

    @property
    def total_destination_rate(self) -> float:
        if self.destination_file_count <= 0:
            return 0.0
        total = sum(r.destination_duplication_rate for r in self.records.values())
        return total / self.destination_file_count

    @property
    def total_self_rate(self) -> float:
        if self.source_file_count <= 0:
            return 0.0
        total = sum(r.self_duplication_rate for r in self.records.values())
        return total / self.source_file_count
