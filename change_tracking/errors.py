"""
Exceptions raised by change sources and their helpers.
"""

from typing import List, Optional, Sequence


class ChangeTrackingError(Exception):
    """Base class for all errors raised by change_tracking."""
    pass


class ExternalCommandError(ChangeTrackingError):
    """Raised when an external program wrote anything to stderr."""

    def __init__(
        self,
        program: str,
        args: Sequence[str],
        stderr: str,
        returncode: Optional[int] = None
    ):
        self.program = program
        self.args_list: List[str] = list(args)
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(f"{program} {' '.join(self.args_list)} failed: {stderr.strip()}")


class ExternalProcessLaunchError(ChangeTrackingError):
    """Raised when an external program could not be started at all."""

    def __init__(self, program: str, reason: str):
        self.program = program
        self.reason = reason
        super().__init__(f"Could not start {program}: {reason}")


class DiffParseError(ChangeTrackingError):
    """Raised for a name-status line that is missing a path field."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Malformed diff entry: {line!r}")


class UnsafePathError(ChangeTrackingError):
    """Raised when asked to delete the current directory or the filesystem root."""
    pass
