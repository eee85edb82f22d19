"""Extracts the student's reported sum from raw program output."""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from utils.logger import get_logger

logger = get_logger()

INTEGER_PATTERN = re.compile(r"-?\d+", re.ASCII)


@dataclass(frozen=True)
class ParsedOutput:
    reported_sum: Optional[int]
    all_numbers: Tuple[int, ...] = ()


def parse_output(stdout_text: Optional[str]) -> ParsedOutput:
    """Finds every integer in ``stdout_text`` and treats the last one as the sum.

    Programs are expected to print the sum last, so prompts or echoed inputs
    printed earlier do not matter. No integers means no reported sum.
    """
    if not stdout_text:
        return ParsedOutput(reported_sum=None)

    numbers = []
    for match in INTEGER_PATTERN.findall(stdout_text):
        try:
            numbers.append(int(match, 10))
        except ValueError:
            continue

    logger.debug(f"All numbers parsed from output: {numbers}")

    if not numbers:
        return ParsedOutput(reported_sum=None)

    return ParsedOutput(reported_sum=numbers[-1], all_numbers=tuple(numbers))
