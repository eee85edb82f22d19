"""Score calculation: scenario pass rate plus two source-text heuristics.

The heuristics are plain regular expressions over the raw source. They do not
parse C; they only approximate "uses a loop" and "checks positivity".
"""

import math
import re
from typing import Sequence

import config
from core.results import ScenarioResult
from utils.logger import get_logger

logger = get_logger()

ITERATION_PATTERN = re.compile(r"\b(for|while|do)\b")
# An if-condition comparing against 0 or 1: "<= 0", "< 1" or "> 0"
POSITIVITY_GUARD_PATTERN = re.compile(r"\bif\s*\([^)]*(<=\s*0|<\s*1|>\s*0)")


def has_iteration_construct(source_text: str) -> bool:
    """True if a ``for``, ``while`` or ``do`` keyword appears anywhere in the source."""
    return bool(ITERATION_PATTERN.search(source_text or ""))


def has_positivity_guard(source_text: str) -> bool:
    """True if some ``if (...)`` condition looks like a positivity check."""
    return bool(POSITIVITY_GUARD_PATTERN.search(source_text or ""))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_score(results: Sequence[ScenarioResult], source_text: str) -> int:
    """Computes the 0-100 grade.

    Args:
        results: Ordered scenario results of a run.
        source_text: The submitted C source, used for the quality heuristics.

    Returns:
        0 if the first scenario could not execute, otherwise the functional share
        (weighted pass rate) plus the quality share, clamped to 0..100.
    """
    if results and results[0].compilation_failed:
        return 0

    total_points = sum(result.points for result in results)
    earned_points = sum(result.points for result in results if result.passed)
    functional_score = (earned_points / total_points) * config.FUNCTIONAL_WEIGHT if total_points > 0 else 0

    quality_score = config.QUALITY_WEIGHT
    if not has_iteration_construct(source_text):
        quality_score -= config.QUALITY_PENALTY
    if not has_positivity_guard(source_text):
        quality_score -= config.QUALITY_PENALTY
    quality_score = max(0, quality_score)

    total = _round_half_up(max(0, min(100, functional_score + quality_score)))
    logger.info(
        f"Score: functional={functional_score:.1f} ({earned_points}/{total_points} points), "
        f"quality={quality_score}, total={total}"
    )
    return total
