"""Fixed test scenarios for the "sum of five positive integers" exercise."""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Scenario:
    """One stdin script and the sum a correct program must report for it."""
    name: str
    stdin_script: str
    expected_sum: int
    points: int
    is_validation_scenario: bool = False

    @property
    def display_input(self) -> str:
        """The stdin script on a single line, newlines shown as ``\\n``."""
        return self.stdin_script.replace("\n", "\\n")


SCENARIOS: Tuple[Scenario, ...] = (
    Scenario(
        name="Test 1: 1 2 3 4 5",
        stdin_script="1\n2\n3\n4\n5\n",
        expected_sum=15,
        points=25,
    ),
    Scenario(
        name="Test 2: 10 20 30 40 50",
        stdin_script="10\n20\n30\n40\n50\n",
        expected_sum=150,
        points=25,
    ),
    # 0, -3 are rejected; first five positives: 5 + 7 + 8 + 9 + 10
    Scenario(
        name="Test 3: zero and negative input",
        stdin_script="0\n-3\n5\n7\n8\n9\n10\n11\n",
        expected_sum=39,
        points=25,
        is_validation_scenario=True,
    ),
    # -1, 0, -2, 0 are rejected; then 3 + 4 + 5 + 6 + 7
    Scenario(
        name="Test 4: repeated invalid attempts",
        stdin_script="-1\n0\n-2\n0\n3\n4\n5\n6\n7\n",
        expected_sum=25,
        points=25,
        is_validation_scenario=True,
    ),
)


def get_scenarios() -> List[Scenario]:
    """Returns the catalog in grading order."""
    return list(SCENARIOS)
