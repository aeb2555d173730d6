"""Tests for JSON and table reporters."""

from __future__ import annotations

import io
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from javaprobe.core.models import Architecture, CompatibilityVerdict, RuntimeInfo
from javaprobe.pipeline.parallel import ProbeOutcome
from javaprobe.reporters import (
    JSONReporter,
    RuntimeReporter,
    TableReporter,
    get_reporter,
    list_available_reporters,
)


def _record(directory: Path, **overrides) -> MagicMock:
    values = dict(
        major_version=17,
        is_64bit=True,
        is_jre=False,
        is_fat_binary=True,
        verdict=CompatibilityVerdict.UNDER_TRANSLATION,
        java_exe=directory / "java",
        javaw_exe=directory / "java",
        architectures=(Architecture.X86_64,),
    )
    values.update(overrides)
    record = MagicMock()
    record.info = RuntimeInfo(**values)
    record.user_imported = False
    return record


@pytest.fixture
def outcomes():
    found = Path("/opt/jdk-17/bin")
    return [
        ProbeOutcome(found, record=_record(found)),
        ProbeOutcome(Path("/opt/broken/bin")),
        ProbeOutcome(Path("/opt/crash/bin"), error="probe exploded"),
    ]


class TestRegistry:
    """Tests for reporter lookup."""

    def test_get_reporter(self) -> None:
        assert isinstance(get_reporter("json"), JSONReporter)
        assert isinstance(get_reporter("TABLE"), TableReporter)
        assert get_reporter("sarif") is None

    def test_list(self) -> None:
        assert list_available_reporters() == ["json", "table"]

    def test_names(self) -> None:
        for name in list_available_reporters():
            reporter = get_reporter(name)
            assert isinstance(reporter, RuntimeReporter)
            assert reporter.name == name


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_document(self, outcomes) -> None:
        output = io.StringIO()
        JSONReporter().report(outcomes, output)
        data = json.loads(output.getvalue())

        assert data["schema_version"] == "1.0"
        assert data["summary"] == {"total": 3, "found": 1, "missing": 2}

        first, second, third = data["runtimes"]
        assert first["directory"] == str(Path("/opt/jdk-17/bin"))
        assert first["info"]["verdict"] == "under_translation"
        assert first["info"]["architectures"] == ["x86_64"]
        assert first["user_imported"] is False
        assert second["info"] is None
        assert second["error"] is None
        assert third["error"] == "probe exploded"

    def test_empty(self) -> None:
        output = io.StringIO()
        JSONReporter().report([], output)
        assert json.loads(output.getvalue())["runtimes"] == []


class TestTableReporter:
    """Tests for TableReporter."""

    def test_table(self, outcomes) -> None:
        output = io.StringIO()
        TableReporter().report(outcomes, output)
        text = output.getvalue()

        assert "Java runtimes" in text
        assert "under_translation" in text
        assert "x86_64 (fat)" in text
        assert "JDK" in text
        assert "no usable runtime" in text
        assert "probe exploded" in text
        assert "Found 1 of 3 runtimes." in text
        # not a terminal, so no ANSI escape codes
        assert "\x1b[" not in text

    def test_brackets_in_paths_are_literal(self) -> None:
        directory = Path("/opt/[odd]/bin")
        output = io.StringIO()
        TableReporter(width=200).report([ProbeOutcome(directory)], output)
        assert "[odd]" in output.getvalue()

    def test_empty(self) -> None:
        output = io.StringIO()
        TableReporter().report([], output)
        assert "No directories probed." in output.getvalue()
