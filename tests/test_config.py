from __future__ import annotations

import pytest

from cpdrate.config import AnalysisConfig
from cpdrate.errors import ValidationError
from cpdrate.languages import DEFAULT_LANGUAGE, Language


def _config(**overrides: object) -> AnalysisConfig:
    values: dict[str, object] = {
        "root": "/repo",
        "source_dir": "/repo/src/",
        "destination_dir": "/repo/modules/dest/",
    }
    values.update(overrides)
    return AnalysisConfig(**values)  # type: ignore[arg-type]


def test_defaults() -> None:
    config = _config()
    assert config.language is DEFAULT_LANGUAGE
    assert config.language is Language.SWIFT
    assert config.minimum_tokens == 50
    assert config.ignore_blank is True
    assert config.report_path == "/repo/report.txt"


def test_identifiers() -> None:
    config = _config()
    assert config.source_identifier == "/repo/src"
    assert config.destination_segment == "dest"


def test_is_source_path_substring() -> None:
    config = _config()
    assert config.is_source_path("/repo/src/A.swift")
    assert config.is_source_path("/repo/src/nested/A.swift")
    assert not config.is_source_path("/repo/lib/A.swift")
    assert not config.is_source_path("")


def test_is_destination_path_segments() -> None:
    config = _config()
    assert config.is_destination_path("/repo/modules/dest/B.swift")
    assert config.is_destination_path("/elsewhere/dest/deep/B.swift")
    assert not config.is_destination_path("/repo/destination/B.swift")
    assert not config.is_destination_path("/repo/other/dest")
    assert not config.is_destination_path("")


def test_validate_ok() -> None:
    _config().validate()


@pytest.mark.parametrize(
    "overrides",
    [
        {"root": ""},
        {"source_dir": ""},
        {"destination_dir": "/"},
        {"minimum_tokens": 0},
    ],
)
def test_validate_rejects(overrides: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        _config(**overrides).validate()


def test_language_parse() -> None:
    assert Language.parse("Kotlin") is Language.KOTLIN
    assert Language.KOTLIN.extension == "kt"
    assert Language.KOTLIN.cpd_name == "kotlin"
    assert Language.RUST.extension == "rs"
    assert Language.SWIFT.extension == "swift"
    with pytest.raises(ValidationError, match="Unsupported language"):
        Language.parse("cobol")
