"""Exception types raised by the vehicle log toolkit."""


class VlogError(Exception):
    """Base class for toolkit errors."""


class LogReadError(VlogError):
    """Raised when an input file cannot be read."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        message = f"Could not read {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class DiagnosticError(VlogError):
    """Raised when the diagnostic service call fails."""
