"""
cpdrate — duplication rate reporter for PMD CPD text reports.

Copyright (c) 2026 cpdrate contributors
Licensed under the MIT License.
"""

from __future__ import annotations

import re
from typing import NamedTuple

# "Found a 12 line (85 tokens) duplication in the following files:"
_GROUP_HEADER_RE = re.compile(r"^Found a ([1-9]\d*) line")
# "Starting at line 3 of /repo/src/A.swift"
_FILE_LOCATION_RE = re.compile(r"Starting at line ([1-9]\d*) of (/.+)?")


class FileLocation(NamedTuple):
    start_line: int
    path: str


def match_group_header(line: str) -> int | None:
    m = _GROUP_HEADER_RE.search(line)
    if m is None:
        return None
    return int(m.group(1))


def match_file_location(line: str) -> FileLocation | None:
    """
    Recognize a location line. A missing path still matches and yields ``""``;
    callers decide what an empty path means.
    """
    m = _FILE_LOCATION_RE.search(line)
    if m is None:
        return None
    return FileLocation(int(m.group(1)), m.group(2) or "")
