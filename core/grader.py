"""Core logic for running a submission against the scenarios and grading it."""

from typing import List, Optional, Sequence

import config
from utils.logger import get_logger
from utils.error_handler import GradingError
from services.execution import ExecutionAdapter
from core.catalog import Scenario, get_scenarios
from core.output_parser import parse_output
from core.judge import VerdictReason, compare_sums
from core.results import GradeReport, ScenarioResult
from core.scoring import calculate_score
from core.feedback import generate_feedback

logger = get_logger()

DEFAULT_COMPILE_FAILED_NOTE = "The code failed to compile."


class Grader:
    """Orchestrates one grading run over the scenario catalog."""

    def __init__(self, adapter: ExecutionAdapter, scenarios: Optional[Sequence[Scenario]] = None):
        """Initializes the Grader.

        Args:
            adapter: Execution adapter wrapping the C engine.
            scenarios: Scenarios to run; defaults to the fixed catalog.
        """
        self.adapter = adapter
        self.scenarios = list(scenarios) if scenarios is not None else get_scenarios()
        logger.info(f"Grader initialized with {len(self.scenarios)} scenarios.")

    def run_all(self, source_text: str, scenarios: Optional[Sequence[Scenario]] = None) -> List[ScenarioResult]:
        """Runs the scenarios in order and judges each one.

        Stops at the first scenario whose execution fails: a submission that does
        not compile or crashes is not run any further.

        Returns:
            Results in scenario order. A failed execution is always the last entry.
        """
        scenarios = self.scenarios if scenarios is None else scenarios
        results: List[ScenarioResult] = []

        for i, scenario in enumerate(scenarios):
            logger.info(f"Running scenario {i+1}/{len(scenarios)}: {scenario.name}")
            outcome = self.adapter.execute(source_text, scenario.stdin_script)

            if not outcome.succeeded:
                logger.warning(f"Execution failed on '{scenario.name}', skipping remaining scenarios.")
                results.append(ScenarioResult(
                    scenario=scenario,
                    passed=False,
                    reported_sum=None,
                    note=outcome.diagnostic_text or DEFAULT_COMPILE_FAILED_NOTE,
                    compilation_failed=True,
                    reason=VerdictReason.EXECUTION_FAILED,
                ))
                break

            parsed = parse_output(outcome.stdout_text)
            verdict = compare_sums(scenario.expected_sum, parsed)
            if config.DEBUG:
                logger.debug(f"'{scenario.name}' stdout: {outcome.stdout_text!r}")
            logger.info(f"'{scenario.name}': passed={verdict.passed}, reported={parsed.reported_sum}, expected={scenario.expected_sum}")

            results.append(ScenarioResult(
                scenario=scenario,
                passed=verdict.passed,
                reported_sum=parsed.reported_sum,
                note=verdict.note,
                compilation_failed=False,
                reason=verdict.reason,
            ))

        return results

    def grade(self, source_text: str) -> GradeReport:
        """Runs all scenarios, then scores the run and builds the feedback.

        Raises:
            GradingError: If the submitted source is empty.
        """
        if not source_text or not source_text.strip():
            raise GradingError("Please paste C code before running the tests.")

        results = self.run_all(source_text)
        score = calculate_score(results, source_text)
        feedback = generate_feedback(results, score, source_text)
        logger.info(f"Grading finished: score={score}, scenarios run={len(results)}")
        return GradeReport(score=score, feedback_text=feedback, results=tuple(results))
