"""
cpdrate — duplication rate reporter for PMD CPD text reports.

Copyright (c) 2026 cpdrate contributors
Licensed under the MIT License.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .counter import count_lines
from .languages import Language


@dataclass(frozen=True, slots=True)
class SourceFile:
    path: str
    lines: int


def _iter_matching(
    path: Path,
    rootp: Path,
    extensions: frozenset[str],
    visited: set[Path],
) -> Iterator[Path]:
    try:
        real = path.resolve()
        # Verify path is actually under root (prevent symlink escapes)
        real.relative_to(rootp)
    except (OSError, RuntimeError, ValueError):
        return

    if path.is_file():
        if path.suffix[1:] in extensions:
            yield path
        return

    if real in visited:
        # Directory already walked through another link (or a cycle)
        return
    visited.add(real)

    try:
        entries = sorted(os.scandir(path), key=lambda e: e.name)
    except OSError:
        # Unreadable or missing directory
        return

    for entry in entries:
        yield from _iter_matching(Path(entry.path), rootp, extensions, visited)


def scan_sources(
    root: str | Path,
    languages: Iterable[Language],
    *,
    ignore_blank: bool = True,
) -> list[SourceFile]:
    """
    Recursively list the files under ``root`` whose extension belongs to one of
    ``languages``, depth-first with entries in name order, each with its line
    count. ``root`` may also be a single file.

    Symlinks resolving outside ``root`` are skipped and every directory is
    walked at most once, so link cycles terminate.
    """
    try:
        rootp = Path(root).resolve(strict=True)
    except (OSError, RuntimeError):
        return []

    extensions = frozenset(lang.extension for lang in languages)
    return [
        SourceFile(str(p), count_lines(p, ignore_blank))
        for p in _iter_matching(Path(root), rootp, extensions, set())
    ]


def total_lines(files: Iterable[SourceFile]) -> int:
    return sum(f.lines for f in files)
