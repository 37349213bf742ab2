"""
cpdrate — duplication rate reporter for PMD CPD text reports.

Copyright (c) 2026 cpdrate contributors
Licensed under the MIT License.
"""

from __future__ import annotations

from pathlib import Path


def count_lines(path: str | Path, ignore_blank: bool = True) -> int:
    """
    Count the lines of a text file.

    With ``ignore_blank`` a line that is empty once its terminator is removed is
    skipped; whitespace-only lines still count. A file that cannot be opened
    counts as 0 lines. Counting stops at the first line that is not valid UTF-8.
    """
    lines = 0
    try:
        with open(path, "rb") as f:
            for raw in f:
                try:
                    text = raw.decode("utf-8")
                except UnicodeDecodeError:
                    break
                if ignore_blank and not text.rstrip("\r\n"):
                    continue
                lines += 1
    except OSError:
        return 0
    return lines


class LineCounter:
    """Memoized ``count_lines`` keyed by path, scoped to one run."""

    __slots__ = ("_cache", "ignore_blank")

    def __init__(self, *, ignore_blank: bool = True) -> None:
        self.ignore_blank = ignore_blank
        self._cache: dict[str, int] = {}

    def line_count(self, path: str) -> int:
        cached = self._cache.get(path)
        if cached is None:
            cached = count_lines(path, self.ignore_blank)
            self._cache[path] = cached
        return cached

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
