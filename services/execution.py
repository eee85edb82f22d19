"""Execution adapter: turns C engine calls into ExecutionOutcome values."""

from dataclasses import dataclass
from typing import Any, List, Optional

import config
from utils.logger import get_logger
from utils.error_handler import ExecutionError

logger = get_logger()


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of running one submission against one stdin script."""
    succeeded: bool
    diagnostic_text: str
    stdout_text: str
    exit_code: Optional[int] = None


class ExecutionAdapter:
    """Wraps a C execution engine so that no failure escapes a scenario run.

    ``engine`` is any object exposing ``run(source_text, stdin_script, write, timeout_ms) -> int``.
    """

    def __init__(self, engine: Any, timeout_ms: int = config.EXECUTION_TIMEOUT_MS):
        self.engine = engine
        self.timeout_ms = timeout_ms

    def execute(self, source_text: str, stdin_script: str) -> ExecutionOutcome:
        """Runs ``source_text`` with ``stdin_script`` and captures stdout.

        Returns:
            A successful outcome carrying the exit code, or a failed outcome whose
            ``diagnostic_text`` is the engine's error message. Output written before
            a failure is preserved in ``stdout_text``.
        """
        chunks: List[str] = []
        try:
            exit_code = self.engine.run(source_text, stdin_script, chunks.append, self.timeout_ms)
        except ExecutionError as e:
            logger.info(f"Execution failed ({e.kind}): {e.args[0] if e.args else e}")
            return ExecutionOutcome(
                succeeded=False,
                diagnostic_text=e.args[0] if e.args else str(e),
                stdout_text="".join(chunks),
            )
        except Exception as e:
            logger.error(f"Unexpected engine error: {e}", exc_info=True)
            return ExecutionOutcome(
                succeeded=False,
                diagnostic_text=str(e) or type(e).__name__,
                stdout_text="".join(chunks),
            )

        return ExecutionOutcome(
            succeeded=True,
            diagnostic_text=f"Compilation/execution successful (exit code {exit_code})",
            stdout_text="".join(chunks),
            exit_code=exit_code,
        )
