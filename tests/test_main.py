"""
Tests for the command-line entry point and the outer error boundary
"""

import json

import pytest

import main
import ui.cli as cli
from conftest import REFERENCE_SOURCE, FakeEngine, reference_program
from core.grader import Grader
from services.execution import ExecutionAdapter
from utils.error_handler import ConfigError


class ExplodingGrader:
    def grade(self, source_text):
        raise RuntimeError("boom")


@pytest.fixture
def fake_grader(monkeypatch):
    grader = Grader(ExecutionAdapter(FakeEngine(program=reference_program)))
    monkeypatch.setattr(main, "build_grader", lambda: grader)
    return grader


@pytest.fixture
def shown_errors(monkeypatch):
    messages = []
    monkeypatch.setattr(cli, "display_run_error", messages.append)
    return messages


class TestRunGrading:

    def test_run_grading_when_unexpected_error_then_no_report_and_error_shown(self, shown_errors):
        assert main.run_grading(ExplodingGrader(), REFERENCE_SOURCE) is None
        assert len(shown_errors) == 1
        assert "boom" in shown_errors[0]

    def test_run_grading_when_rendering_fails_then_no_report_and_error_shown(self, monkeypatch, shown_errors):
        def broken_display(report):
            raise ValueError("render failed")
        monkeypatch.setattr(cli, "display_report", broken_display)
        grader = Grader(ExecutionAdapter(FakeEngine(program=reference_program)))
        assert main.run_grading(grader, REFERENCE_SOURCE) is None
        assert len(shown_errors) == 1
        assert "render failed" in shown_errors[0]

    def test_run_grading_when_empty_source_then_error_shown(self, shown_errors):
        grader = Grader(ExecutionAdapter(FakeEngine(program=reference_program)))
        assert main.run_grading(grader, "") is None
        assert "paste C code" in shown_errors[0]

    def test_run_grading_when_json_then_report_printed(self, capsys):
        grader = Grader(ExecutionAdapter(FakeEngine(program=reference_program)))
        report = main.run_grading(grader, REFERENCE_SOURCE, as_json=True)
        data = json.loads(capsys.readouterr().out)
        assert report.score == 100
        assert data["score"] == 100
        assert len(data["results"]) == 4

    def test_run_grading_when_json_and_unexpected_error_then_zero_score_json(self, capsys):
        assert main.run_grading(ExplodingGrader(), REFERENCE_SOURCE, as_json=True) is None
        data = json.loads(capsys.readouterr().out)
        assert data["score"] == 0
        assert "boom" in data["error"]


class TestMain:

    def test_main_when_source_file_given_then_exit_code_zero(self, fake_grader, tmp_path, capsys):
        source = tmp_path / "sum.c"
        source.write_text(REFERENCE_SOURCE, encoding="utf-8")
        assert main.main([str(source), "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["score"] == 100

    def test_main_when_source_file_missing_then_error_json(self, fake_grader, tmp_path, capsys):
        assert main.main([str(tmp_path / "missing.c"), "--json"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert data["score"] == 0
        assert "missing.c" in data["error"]

    def test_main_when_compiler_missing_then_setup_error(self, monkeypatch, capsys):
        def no_compiler():
            raise ConfigError("C compiler 'gcc' was not found.")
        monkeypatch.setattr(main, "build_grader", no_compiler)
        assert main.main(["sum.c", "--json"]) == 1
        assert "Setup Error" in json.loads(capsys.readouterr().out)["error"]

    def test_main_when_source_on_stdin_then_graded(self, fake_grader, monkeypatch, capsys):
        import io
        monkeypatch.setattr("sys.stdin", io.StringIO(REFERENCE_SOURCE))
        assert main.main(["-", "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["score"] == 100
