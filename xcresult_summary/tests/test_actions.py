from pathlib import Path

import pytest

from xcresult_summary.core.actions import ActionsHost, get_input
from xcresult_summary.core.errors import ConfigurationError


def test_get_input_reads_runner_environment(monkeypatch):
    monkeypatch.setenv("INPUT_XCRESULT-PATH", "  build/Test.xcresult \n")
    assert get_input("xcresult-path") == "build/Test.xcresult"


def test_get_input_required(monkeypatch):
    monkeypatch.delenv("INPUT_XCRESULT-PATH", raising=False)
    assert get_input("xcresult-path") == ""
    with pytest.raises(ConfigurationError, match="xcresult-path"):
        get_input("xcresult-path", required=True)


def test_outputs_are_appended_to_output_file(tmp_path: Path):
    output_file = tmp_path / "output"
    output_file.write_text("earlier=1\n")
    host = ActionsHost(output_file=output_file)

    host.set_output("total-tests", 12)
    host.set_output("build-status", "succeeded")

    assert output_file.read_text() == "earlier=1\ntotal-tests=12\nbuild-status=succeeded\n"
    assert host.outputs == {"total-tests": "12", "build-status": "succeeded"}


def test_multiline_output_uses_delimiter(tmp_path: Path):
    output_file = tmp_path / "output"
    host = ActionsHost(output_file=output_file)

    host.set_output("summary", "## Build Results\n\nok")

    lines = output_file.read_text().splitlines()
    name, delimiter = lines[0].split("<<")
    assert name == "summary"
    assert lines[1:4] == ["## Build Results", "", "ok"]
    assert lines[4] == delimiter


def test_summary_is_appended(tmp_path: Path):
    summary_file = tmp_path / "summary.md"
    host = ActionsHost(summary_file=summary_file)

    host.write_summary("one\n")
    host.write_summary("two\n")

    assert summary_file.read_text() == "one\ntwo\n"


def test_summary_without_file_goes_to_stdout(capsys):
    ActionsHost().write_summary("## Build Results")
    assert capsys.readouterr().out == "## Build Results\n"


def test_set_failed_emits_error_command(capsys):
    host = ActionsHost()
    assert host.exit_code == 0

    host.set_failed("Invalid build result format\nsecond line")

    assert host.failed
    assert host.exit_code == 1
    assert capsys.readouterr().out == "::error::Invalid build result format%0Asecond line\n"
