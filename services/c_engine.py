"""C execution engine backed by a system C compiler.

The engine is the external capability the grading core depends on: it takes C
source text and a stdin script, compiles and runs the program, streams the
program's stdout through a ``write`` callback and returns the exit code. Any
compile error, crash, timeout or runaway output is raised as
:class:`ExecutionError`.
"""

import os
import shutil
import signal
import subprocess
import tempfile
import threading
import time
from typing import Callable, List, Optional

import config
from utils.logger import get_logger
from utils.error_handler import ConfigError, ExecutionError

logger = get_logger()

SOURCE_FILE_NAME = "submission.c"
BINARY_FILE_NAME = "submission.exe" if os.name == "nt" else "submission"
OUTPUT_CHUNK_BYTES = 64 * 1024


class CCompilerEngine:
    """Compiles and runs C programs with an external compiler (gcc by default)."""

    def __init__(self, compiler: str = config.C_COMPILER, flags: Optional[List[str]] = None,
                 max_output_bytes: int = config.MAX_OUTPUT_BYTES):
        self.compiler = compiler
        self.flags = list(config.C_COMPILER_FLAGS if flags is None else flags)
        self.max_output_bytes = max_output_bytes
        logger.debug(f"CCompilerEngine created: compiler={self.compiler}, flags={self.flags}")

    def check_available(self) -> str:
        """Returns the resolved compiler path.

        Raises:
            ConfigError: If the compiler executable cannot be found on PATH.
        """
        path = shutil.which(self.compiler)
        if not path:
            logger.critical(f"C compiler '{self.compiler}' not found on PATH.")
            raise ConfigError(
                f"C compiler '{self.compiler}' was not found. Install it or set GRADER_C_COMPILER."
            )
        return path

    def run(self, source_text: str, stdin_script: str, write: Callable[[str], None], timeout_ms: int) -> int:
        """Compiles ``source_text`` and runs it with ``stdin_script`` on stdin.

        The ``timeout_ms`` budget covers both compilation and execution.

        Args:
            source_text: The C program to build.
            stdin_script: Text fed to the program's standard input.
            write: Receives everything the program printed to stdout, including
                partial output when the program crashes or times out.
            timeout_ms: Wall-clock budget in milliseconds.

        Returns:
            The program's exit code.

        Raises:
            ExecutionError: On compile error, abnormal termination, timeout, or
                when stdout grows past ``max_output_bytes``.
        """
        deadline = time.monotonic() + timeout_ms / 1000.0
        with tempfile.TemporaryDirectory(prefix="positive_sum_") as work_dir:
            source_path = os.path.join(work_dir, SOURCE_FILE_NAME)
            binary_path = os.path.join(work_dir, BINARY_FILE_NAME)
            with open(source_path, "w", encoding="utf-8") as f:
                f.write(source_text)

            self._compile(source_path, binary_path, deadline, timeout_ms)
            return self._execute(binary_path, work_dir, stdin_script, write, deadline, timeout_ms)

    def _remaining(self, deadline: float, timeout_ms: int, stage: str) -> float:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise ExecutionError(f"Execution timed out after {timeout_ms} ms", kind=ExecutionError.TIMEOUT)
        logger.debug(f"{stage}: {remaining:.3f}s of budget left")
        return remaining

    def _compile(self, source_path: str, binary_path: str, deadline: float, timeout_ms: int) -> None:
        command = [self.compiler, *self.flags, source_path, "-o", binary_path]
        logger.debug(f"Compiling: {' '.join(command)}")
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self._remaining(deadline, timeout_ms, "compile"),
            )
        except subprocess.TimeoutExpired as e:
            raise ExecutionError(
                f"Compilation timed out after {timeout_ms} ms", kind=ExecutionError.TIMEOUT
            ) from e
        except FileNotFoundError as e:
            raise ConfigError(f"C compiler '{self.compiler}' could not be started: {e}") from e

        if completed.returncode != 0:
            details = (completed.stderr or completed.stdout or "").strip()
            # Hide the temporary directory from the student-facing message
            details = details.replace(source_path, SOURCE_FILE_NAME)
            logger.info(f"Compilation failed with status {completed.returncode}.")
            raise ExecutionError(f"Compilation failed:\n{details}", kind=ExecutionError.COMPILE)

    def _execute(self, binary_path: str, work_dir: str, stdin_script: str,
                 write: Callable[[str], None], deadline: float, timeout_ms: int) -> int:
        process = subprocess.Popen(
            [binary_path],
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            cwd=work_dir,
        )
        collected = bytearray()
        overflowed = threading.Event()

        def pump_stdout():
            # Read in bounded chunks; stop and kill once the cap is reached
            while True:
                chunk = process.stdout.read1(OUTPUT_CHUNK_BYTES)
                if not chunk:
                    return
                room = self.max_output_bytes - len(collected)
                collected.extend(chunk[:room])
                if len(chunk) > room:
                    overflowed.set()
                    process.kill()
                    return

        reader = threading.Thread(target=pump_stdout, daemon=True)
        reader.start()

        try:
            process.stdin.write(stdin_script.encode("utf-8"))
            process.stdin.close()
        except BrokenPipeError:
            # The program exited without reading all of its input
            pass

        timed_out = False
        try:
            returncode = process.wait(timeout=self._remaining(deadline, timeout_ms, "execute"))
        except (subprocess.TimeoutExpired, ExecutionError):
            timed_out = True
            process.kill()
            returncode = process.wait()
        finally:
            reader.join(timeout=1.0)
            process.stdout.close()

        output = bytes(collected).decode("utf-8", errors="replace")
        if output:
            write(output)

        if overflowed.is_set():
            logger.info(f"Program output exceeded {self.max_output_bytes} bytes, process killed.")
            raise ExecutionError(
                f"Output limit exceeded: the program printed more than {self.max_output_bytes} bytes",
                kind=ExecutionError.OUTPUT_LIMIT,
                stdout=output,
            )

        if timed_out:
            raise ExecutionError(
                f"Execution timed out after {timeout_ms} ms", kind=ExecutionError.TIMEOUT, stdout=output
            )

        if returncode < 0:
            # Negative status means the process was killed by a signal (POSIX)
            try:
                signal_name = signal.Signals(-returncode).name
            except ValueError:
                signal_name = f"signal {-returncode}"
            raise ExecutionError(
                f"Runtime error: program terminated by {signal_name}",
                kind=ExecutionError.RUNTIME,
                stdout=output,
            )

        logger.debug(f"Program exited with code {returncode}")
        return returncode
