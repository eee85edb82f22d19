"""Pass/fail comparison of the reported sum against the expected one."""

from dataclasses import dataclass
from enum import Enum

from core.output_parser import ParsedOutput


class VerdictReason(Enum):
    PASSED = "passed"
    NO_NUMBER_FOUND = "no_number_found"
    WRONG_SUM = "wrong_sum"
    EXECUTION_FAILED = "execution_failed"


@dataclass(frozen=True)
class Verdict:
    passed: bool
    note: str
    reason: VerdictReason


NO_NUMBER_NOTE = (
    "Could not find a final number in the output. Make sure the program prints the sum "
    "of the 5 numbers at the end (preferably as 'sum = X') and prints no other numbers after it."
)
PASSED_NOTE = "Passed ✓"


def compare_sums(expected_sum: int, parsed: ParsedOutput) -> Verdict:
    """Judges one scenario by exact integer equality."""
    if parsed.reported_sum is None:
        return Verdict(passed=False, note=NO_NUMBER_NOTE, reason=VerdictReason.NO_NUMBER_FOUND)

    if parsed.reported_sum != expected_sum:
        return Verdict(
            passed=False,
            note=f"Wrong sum. Expected {expected_sum}, got {parsed.reported_sum}.",
            reason=VerdictReason.WRONG_SUM,
        )

    return Verdict(passed=True, note=PASSED_NOTE, reason=VerdictReason.PASSED)
