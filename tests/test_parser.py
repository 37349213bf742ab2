from __future__ import annotations

from pathlib import Path

import pytest

from cpdrate.counter import LineCounter
from cpdrate.errors import ReportReadError
from cpdrate.models import FileLineInfo
from cpdrate.parser import GroupParser, ReportGroups, read_report_lines

from tests._project_fixtures import Project, group_text


def _parser(project: Project) -> GroupParser:
    return GroupParser(project.config(), LineCounter())


def test_single_group(project: Project) -> None:
    a = project.source("A.swift", 40)
    b = project.destination("B.swift", 60)
    text = group_text(12, a, b)

    groups = list(_parser(project).parse_lines(text.splitlines()))

    assert len(groups) == 1
    group = groups[0]
    assert group.declared_lines == 12
    assert group.source == FileLineInfo(str(a), 40)
    assert group.destinations == [FileLineInfo(str(b), 60)]


def test_group_without_source_is_dropped(
    project: Project
) -> None:
    b = project.destination("B.swift", 10)
    c = project.destination("C.swift", 10)
    groups = list(_parser(project).parse_lines(group_text(5, b, c).splitlines()))
    assert groups == []


def test_group_with_source_but_no_destination_is_emitted(
    project: Project
) -> None:
    a = project.source("A.swift", 10)
    a2 = project.source("A2.swift", 10)
    groups = list(_parser(project).parse_lines(group_text(5, a, a2).splitlines()))
    assert len(groups) == 1
    assert groups[0].source is not None
    assert groups[0].destinations == []


def test_second_source_occurrence_clears_destinations(
    project: Project
) -> None:
    a = project.source("A.swift", 10)
    b = project.destination("B.swift", 10)
    a2 = project.source("A2.swift", 10)
    groups = list(_parser(project).parse_lines(group_text(5, a, b, a2).splitlines()))
    assert len(groups) == 1
    assert groups[0].source == FileLineInfo(str(a), 10)
    assert groups[0].destinations == []


def test_unrelated_file_clears_then_later_destination_kept(
    project: Project
) -> None:
    a = project.source("A.swift", 10)
    b = project.destination("B.swift", 20)
    other = project.root / "other" / "X.swift"
    c = project.destination("C.swift", 30)
    text = group_text(5, a, b, other, c)

    groups = list(_parser(project).parse_lines(text.splitlines()))
    assert groups[0].destinations == [FileLineInfo(str(c), 30)]


def test_destination_is_segment_match_not_substring(
    project: Project
) -> None:
    a = project.source("A.swift", 10)
    lookalike = project.root / "destination_old" / "B.swift"
    named_like_segment = project.root / "other" / "dest"
    groups = list(
        _parser(project).parse_lines(
            group_text(5, a, lookalike, named_like_segment).splitlines()
        )
    )
    assert groups[0].destinations == []


def test_destination_segment_with_regex_metacharacters(
    tmp_path: Path
) -> None:
    project = Project(
        root=tmp_path,
        source_dir=tmp_path / "src",
        destination_dir=tmp_path / "dest(v2).+",
    )
    a = project.source("A.swift", 10)
    b = project.destination("B.swift", 10)
    groups = list(_parser(project).parse_lines(group_text(5, a, b).splitlines()))
    assert groups[0].destinations == [FileLineInfo(str(b), 10)]


def test_empty_path_is_unusable(project: Project) -> None:
    a = project.source("A.swift", 10)
    b = project.destination("B.swift", 10)
    lines = [
        "Found a 5 line (40 tokens) duplication in the following files: ",
        f"Starting at line 1 of {a}",
        f"Starting at line 1 of {b}",
        "Starting at line 9 of ",
        "",
    ]
    counter = LineCounter()
    groups = list(GroupParser(project.config(), counter).parse_lines(lines))
    assert len(groups) == 1
    assert groups[0].destinations == []
    assert len(counter) == 2


def test_missing_file_counts_as_zero(project: Project) -> None:
    a = project.source_dir / "Gone.swift"
    b = project.destination("B.swift", 10)
    groups = list(_parser(project).parse_lines(group_text(5, a, b).splitlines()))
    assert groups[0].source == FileLineInfo(str(a), 0)


def test_unterminated_group_not_emitted(project: Project) -> None:
    a = project.source("A.swift", 10)
    b = project.destination("B.swift", 10)
    lines = [
        "Found a 5 line duplication",
        f"Starting at line 1 of {a}",
        f"Starting at line 1 of {b}",
    ]
    assert list(_parser(project).parse_lines(lines)) == []


def test_header_inside_group_overwrites_declared_lines(project: Project) -> None:
    a = project.source("A.swift", 10)
    b = project.destination("B.swift", 10)
    lines = [
        "Found a 5 line duplication",
        f"Starting at line 1 of {a}",
        "Found a 7 line duplication",
        f"Starting at line 1 of {b}",
        "",
    ]
    groups = list(_parser(project).parse_lines(lines))
    assert len(groups) == 1
    assert groups[0].declared_lines == 7
    assert groups[0].destinations == [FileLineInfo(str(b), 10)]


def test_locations_and_blanks_outside_group_ignored(project: Project) -> None:
    a = project.source("A.swift", 10)
    b = project.destination("B.swift", 10)
    lines = [
        "",
        f"Starting at line 1 of {a}",
        "=====================================================================",
        "Found a 5 line duplication",
        f"Starting at line 1 of {a}",
        f"Starting at line 1 of {b}",
        "    let value0 = 0",
        "",
        "",
    ]
    groups = list(_parser(project).parse_lines(lines))
    assert len(groups) == 1


def test_line_counts_are_memoized(project: Project) -> None:
    a = project.source("A.swift", 10)
    b = project.destination("B.swift", 10)
    counter = LineCounter()
    parser = GroupParser(project.config(), counter)
    text = group_text(5, a, b) + group_text(6, a, b)
    assert len(list(parser.parse_lines(text.splitlines()))) == 2
    assert len(counter) == 2


def test_read_report_lines_skips_undecodable(tmp_path: Path) -> None:
    report = tmp_path / "report.txt"
    report.write_bytes(b"first\r\n\xff\xfe bad\nthird\n")
    assert list(read_report_lines(report)) == ["first", "third"]


def test_read_report_lines_missing(tmp_path: Path) -> None:
    with pytest.raises(ReportReadError):
        list(read_report_lines(tmp_path / "missing.txt"))


def test_report_groups_restartable(project: Project) -> None:
    a = project.source("A.swift", 10)
    b = project.destination("B.swift", 20)
    report = project.write_report(group_text(4, a, b) + group_text(6, a, b))

    groups = ReportGroups(_parser(project), report)
    first = list(groups)
    second = list(groups)
    assert first == second
    assert [g.declared_lines for g in first] == [4, 6]
