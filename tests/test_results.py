"""
Unit Tests for ScenarioResult / GradeReport
"""

from core.catalog import SCENARIOS
from core.judge import VerdictReason
from core.results import GradeReport, ScenarioResult


def make_result(passed=True, compilation_failed=False):
    return ScenarioResult(
        scenario=SCENARIOS[2],
        passed=passed,
        reported_sum=39 if passed else None,
        note="note",
        compilation_failed=compilation_failed,
        reason=VerdictReason.EXECUTION_FAILED if compilation_failed else VerdictReason.PASSED,
    )


class TestScenarioResult:

    def test_properties_when_accessed_then_forward_scenario_fields(self):
        result = make_result()
        assert result.name == SCENARIOS[2].name
        assert result.stdin_script == SCENARIOS[2].stdin_script
        assert result.expected_sum == 39
        assert result.points == 25
        assert result.is_validation_scenario is True

    def test_to_dict_when_called_then_uses_display_input(self):
        data = make_result().to_dict()
        assert data["input"] == "0\\n-3\\n5\\n7\\n8\\n9\\n10\\n11\\n"
        assert data["reason"] == "passed"
        assert data["reported_sum"] == 39


class TestGradeReport:

    def test_compilation_failed_when_first_result_failed_then_true(self):
        report = GradeReport(score=0, feedback_text="x", results=(make_result(False, True),))
        assert report.compilation_failed is True
        assert report.to_dict()["compilation_failed"] is True

    def test_execution_failed_when_later_result_failed_then_true_but_not_compilation_failed(self):
        report = GradeReport(score=73, feedback_text="x", results=(make_result(), make_result(False, True)))
        assert report.compilation_failed is False
        assert report.execution_failed is True
        assert report.to_dict()["execution_failed"] is True

    def test_execution_failed_when_all_ran_then_false(self):
        assert GradeReport(score=100, feedback_text="x", results=(make_result(),)).execution_failed is False

    def test_compilation_failed_when_no_results_then_false(self):
        assert GradeReport(score=20, feedback_text="x", results=()).compilation_failed is False

    def test_to_dict_when_called_then_results_in_order(self):
        report = GradeReport(score=100, feedback_text="ok", results=(make_result(), make_result()))
        data = report.to_dict()
        assert data["score"] == 100
        assert data["feedback"] == "ok"
        assert len(data["results"]) == 2
