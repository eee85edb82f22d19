"""Per-scenario results and the final grade report of a grading run."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from core.catalog import Scenario
from core.judge import VerdictReason


@dataclass(frozen=True)
class ScenarioResult:
    scenario: Scenario
    passed: bool
    reported_sum: Optional[int]
    note: str
    compilation_failed: bool = False
    reason: VerdictReason = VerdictReason.PASSED

    @property
    def name(self) -> str:
        return self.scenario.name

    @property
    def stdin_script(self) -> str:
        return self.scenario.stdin_script

    @property
    def expected_sum(self) -> int:
        return self.scenario.expected_sum

    @property
    def points(self) -> int:
        return self.scenario.points

    @property
    def is_validation_scenario(self) -> bool:
        return self.scenario.is_validation_scenario

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "input": self.scenario.display_input,
            "expected_sum": self.expected_sum,
            "points": self.points,
            "is_validation_scenario": self.is_validation_scenario,
            "passed": self.passed,
            "reported_sum": self.reported_sum,
            "note": self.note,
            "compilation_failed": self.compilation_failed,
            "reason": self.reason.value,
        }


@dataclass(frozen=True)
class GradeReport:
    """Final artifact of one grading run.

    A failed execution is always the last result. When it happened on the first
    scenario it is the only result and the score is 0. A later failure keeps the
    earlier results and their points.
    """
    score: int
    feedback_text: str
    results: Tuple[ScenarioResult, ...]

    @property
    def compilation_failed(self) -> bool:
        return bool(self.results) and self.results[0].compilation_failed

    @property
    def execution_failed(self) -> bool:
        return any(result.compilation_failed for result in self.results)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "feedback": self.feedback_text,
            "compilation_failed": self.compilation_failed,
            "execution_failed": self.execution_failed,
            "results": [result.to_dict() for result in self.results],
        }
