"""Short diagnostic feedback for the student."""

from typing import List, Sequence

from core.judge import VerdictReason
from core.results import ScenarioResult
from core.scoring import has_iteration_construct, has_positivity_guard

COMPILE_FAILED_FEEDBACK = "The code does not compile. Please fix the compilation errors and try again."
PERFECT_FEEDBACK = (
    "Excellent! You read 5 positive numbers, validated the input, "
    "and the sum is computed and printed correctly. 🎉"
)

WRONG_SUM_HINT = (
    "There is a problem computing or printing the sum. "
    "Check that the code really sums only the 5 positive numbers."
)
VALIDATION_HINT = (
    "The code does not seem to handle non-positive numbers (0 or negative) correctly. "
    "Ask the user to enter the number again instead of counting it as one of the 5 numbers."
)
LOOP_HINT = (
    "There seems to be no loop for reading the numbers. "
    "The exercise requires a loop that runs until 5 positive numbers have been read."
)
POSITIVITY_CHECK_HINT = (
    "A check that the number is positive is missing. "
    "Make sure the number is greater than 0 before adding it to the sum and counting it."
)

GOOD_WORK_FEEDBACK = (
    "Good work! Most tests passed, there are a few minor issues to improve. "
    "See the test case details."
)
PROGRESS_FEEDBACK = (
    "Nice progress, but some tests failed. "
    "Review the positivity check and the sum calculation."
)
NEEDS_WORK_FEEDBACK = (
    "The code needs more work. Review the loop logic, the positivity condition, "
    "and how you compute and print the sum."
)


def generate_feedback(results: Sequence[ScenarioResult], score: int, source_text: str) -> str:
    """Builds the feedback message for a graded run.

    Specific hints are collected in a fixed order and joined with spaces. When
    none applies, a generic message is chosen by score band.
    """
    if results and results[0].compilation_failed:
        return COMPILE_FAILED_FEEDBACK

    if score == 100:
        return PERFECT_FEEDBACK

    hints: List[str] = []

    if any(not r.passed and r.reason is VerdictReason.WRONG_SUM for r in results):
        hints.append(WRONG_SUM_HINT)

    if any(r.is_validation_scenario and not r.passed for r in results):
        hints.append(VALIDATION_HINT)

    if not has_iteration_construct(source_text):
        hints.append(LOOP_HINT)

    if not has_positivity_guard(source_text):
        hints.append(POSITIVITY_CHECK_HINT)

    if hints:
        return " ".join(hints)

    if score >= 80:
        return GOOD_WORK_FEEDBACK
    if score >= 60:
        return PROGRESS_FEEDBACK
    return NEEDS_WORK_FEEDBACK
