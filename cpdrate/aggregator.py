"""
cpdrate — duplication rate reporter for PMD CPD text reports.

Copyright (c) 2026 cpdrate contributors
Licensed under the MIT License.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import AggregatedRecord, DuplicationGroup, RunSummary

RecordMap = dict[str, AggregatedRecord]


def aggregate(groups: Iterable[DuplicationGroup]) -> RecordMap:
    """
    Fold groups into one record per source file, in order of first sighting.

    The first group seen for a source file fixes its primary destination; later
    groups only add their declared lines.
    """
    records: RecordMap = {}
    for group in groups:
        source = group.source
        if source is None or not group.destinations:
            continue
        key = source.path
        record = records.get(key)
        if record is None:
            records[key] = AggregatedRecord(
                source_file=source,
                primary_destination=group.destinations[0],
                duplicated_lines=group.declared_lines,
            )
        else:
            record.add_lines(group.declared_lines)
    return records


def summarize(
    records: RecordMap,
    *,
    destination_file_count: int,
    source_file_count: int,
) -> RunSummary:
    return RunSummary(
        records=records,
        destination_file_count=destination_file_count,
        source_file_count=source_file_count,
    )
