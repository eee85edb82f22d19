"""Custom exception classes for the application."""

class BaseGraderException(Exception):
    """Base exception for all application-specific errors."""
    pass

class ConfigError(BaseGraderException):
    """Error related to configuration, e.g. the C compiler cannot be found."""
    pass

class ExecutionError(BaseGraderException):
    """Error raised by the C execution engine (compile error, runtime trap, timeout, output limit).

    Args:
        message: Human-readable diagnostic, usually the compiler or runtime message.
        kind: One of ``"compile"``, ``"runtime"``, ``"timeout"`` or ``"output_limit"``.
        stdout: Whatever the program wrote to stdout before failing.
    """
    COMPILE = "compile"
    RUNTIME = "runtime"
    TIMEOUT = "timeout"
    OUTPUT_LIMIT = "output_limit"

    def __init__(self, message: str, kind: str | None = None, stdout: str = ""):
        super().__init__(message)
        self.kind = kind
        self.stdout = stdout

    def __str__(self) -> str:
        base = super().__str__()
        if self.kind:
            return f"{base} (Stage: {self.kind})"
        return base

class GradingError(BaseGraderException):
    """Error during the grading logic or feedback generation."""
    pass

class UserCancelledError(BaseGraderException):
    """Error raised when the user cancels an operation."""
    pass
