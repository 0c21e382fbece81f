"""Errors raised while checking for and publishing Go updates."""

from typing import Optional, Sequence


class GoAutomateError(Exception):
    """Base class for every failure the updater reports."""


class FetchError(GoAutomateError):
    """Network failure or non-success HTTP status."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ParseError(GoAutomateError):
    """Malformed text or JSON."""


class VersionNotFoundError(ParseError):
    """No version token could be located in the input."""


class ChecksumNotFoundError(GoAutomateError):
    """The release manifest has no entry for the requested artifact."""

    def __init__(self, filename: str):
        super().__init__(f"checksum not found for {filename}")
        self.filename = filename


class ChecksumMismatchError(GoAutomateError):
    """Downloaded bytes do not match the expected sha256."""

    def __init__(self, filename: str, expected: str, actual: str):
        super().__init__(
            f"checksum mismatch for {filename}: expected {expected}, got {actual}"
        )
        self.filename = filename
        self.expected = expected
        self.actual = actual


class WriteError(GoAutomateError):
    """Local filesystem failure."""


class CommandError(GoAutomateError):
    """An external command exited non-zero or could not be started."""

    def __init__(self, command: str, args: Sequence[str], returncode: Optional[int] = None,
                 stderr: str = ""):
        detail = f"exit status {returncode}" if returncode is not None else "could not start"
        message = f"error running '{command} {list(args)}': {detail}"
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)
        self.command = command
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr
