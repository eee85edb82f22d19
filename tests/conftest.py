import re
import shutil

import pytest

from utils.error_handler import ExecutionError


REFERENCE_SOURCE = r"""
#include <stdio.h>

int main(void) {
    int count = 0, num, sum = 0;
    while (count < 5) {
        printf("Enter a positive number: ");
        if (scanf("%d", &num) != 1) {
            return 1;
        }
        if (num <= 0) {
            printf("Invalid, try again.\n");
            continue;
        }
        sum += num;
        count++;
    }
    printf("sum = %d\n", sum);
    return 0;
}
"""

# Sums the first five inputs without rejecting non-positive ones
UNCONDITIONAL_SOURCE = r"""
#include <stdio.h>

int main(void) {
    int i, num, sum = 0;
    for (i = 0; i < 5; i++) {
        scanf("%d", &num);
        sum += num;
    }
    printf("sum = %d\n", sum);
    return 0;
}
"""

STRAIGHT_LINE_SOURCE = r"""
#include <stdio.h>

int main(void) {
    int a, b, c, d, e;
    scanf("%d %d %d %d %d", &a, &b, &c, &d, &e);
    printf("%d\n", a + b + c + d + e);
    return 0;
}
"""

HAS_GCC = shutil.which("gcc") is not None


def _stdin_numbers(stdin_script):
    return [int(token) for token in re.findall(r"-?\d+", stdin_script)]


def reference_program(stdin_script):
    positives = [n for n in _stdin_numbers(stdin_script) if n > 0][:5]
    return f"Enter numbers...\nsum = {sum(positives)}\n"


def unconditional_program(stdin_script):
    return f"sum = {sum(_stdin_numbers(stdin_script)[:5])}\n"


class FakeEngine:
    """Stands in for the C engine: ``program`` maps a stdin script to stdout text."""

    def __init__(self, program=None, error=None, partial_output=""):
        self.program = program
        self.error = error
        self.partial_output = partial_output
        self.calls = []

    def run(self, source_text, stdin_script, write, timeout_ms):
        self.calls.append((source_text, stdin_script, timeout_ms))
        if self.error is not None:
            if self.partial_output:
                write(self.partial_output)
            raise self.error
        write(self.program(stdin_script))
        return 0


@pytest.fixture
def reference_engine():
    return FakeEngine(program=reference_program)


@pytest.fixture
def unconditional_engine():
    return FakeEngine(program=unconditional_program)


@pytest.fixture
def compile_error_engine():
    return FakeEngine(error=ExecutionError("submission.c:3: error: expected ';'", kind=ExecutionError.COMPILE))
