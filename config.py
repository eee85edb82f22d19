"""Configuration settings for the C Positive Sum Grader."""

import os
import shlex
import logging
from typing import Final, List

# Debug flag: 1 = debug mode (verbose logging), 0 = production mode
DEBUG: Final[int] = int(os.environ.get("GRADER_DEBUG", "0"))

# --- C Execution Engine Settings ---

# Compiler executable used to build student submissions (must be on PATH)
C_COMPILER: Final[str] = os.environ.get("GRADER_C_COMPILER", "gcc")
# Extra flags passed to the compiler. Warnings are silenced; only errors matter for grading.
C_COMPILER_FLAGS: Final[List[str]] = shlex.split(os.environ.get("GRADER_C_FLAGS", "-std=c99 -O0 -w"))

# Hard wall-clock budget for one scenario (compile + run), in milliseconds
EXECUTION_TIMEOUT_MS: Final[int] = int(os.environ.get("GRADER_TIMEOUT_MS", "3000"))

if EXECUTION_TIMEOUT_MS <= 0:
    raise ValueError(f"GRADER_TIMEOUT_MS must be a positive integer, got {EXECUTION_TIMEOUT_MS}")

# Cap on captured stdout per scenario; a program printing more is killed
MAX_OUTPUT_BYTES: Final[int] = int(os.environ.get("GRADER_MAX_OUTPUT_BYTES", str(1024 * 1024)))

if MAX_OUTPUT_BYTES <= 0:
    raise ValueError(f"GRADER_MAX_OUTPUT_BYTES must be a positive integer, got {MAX_OUTPUT_BYTES}")

# --- Scoring Settings ---

# Share of the score earned by passing test scenarios
FUNCTIONAL_WEIGHT: Final[int] = 80
# Share of the score earned by the source-text quality heuristics
QUALITY_WEIGHT: Final[int] = 20
# Deducted from the quality share for each heuristic that is not satisfied
QUALITY_PENALTY: Final[int] = 10

# --- File Paths ---
LOG_DIR: Final[str] = "logs"
LOG_FILE: Final[str] = os.environ.get("GRADER_LOG_FILE", os.path.join(LOG_DIR, "grader_app.log"))

# --- Logging Configuration ---
# LOG_LEVEL is used for file logging, console logging is only enabled in DEBUG mode
LOG_LEVEL = logging.DEBUG if DEBUG else logging.INFO
# Structured log format: timestamp, level, logger, module.function:line, message
LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(module)s.%(funcName)s:%(lineno)d | %(message)s'

# Basic check
if __name__ == "__main__":
    print(f"Debug Mode: {'On' if DEBUG else 'Off'}")
    print(f"Log Level: {logging.getLevelName(LOG_LEVEL)}")
    print(f"Log File: {LOG_FILE}")
    print(f"C Compiler: {C_COMPILER} {' '.join(C_COMPILER_FLAGS)}")
    print(f"Execution Timeout: {EXECUTION_TIMEOUT_MS} ms")
    print(f"Output Limit: {MAX_OUTPUT_BYTES} bytes")
    print(f"Score Weights: functional={FUNCTIONAL_WEIGHT}, quality={QUALITY_WEIGHT} (penalty {QUALITY_PENALTY})")
