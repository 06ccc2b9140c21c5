"""
RKL error taxonomy.

A run that finds no pod is not an error and has no exception here; the
engine reports it as a NO_MATCH outcome and the CLI exits cleanly.
"""

from typing import Optional


class RklError(Exception):
    """Base class for every failure the CLI turns into a non-zero exit."""


class ConfigError(RklError):
    """The YAML config file exists but cannot be used."""


class ListingParseError(RklError):
    """A pod listing line does not decompose into the expected columns."""

    def __init__(self, line_no: int, line: str, field_count: int):
        self.line_no = line_no
        self.line = line
        self.field_count = field_count
        super().__init__(
            f"Cannot parse pod listing line {line_no}: expected 9 columns, "
            f"found {field_count}: {line.strip()!r}"
        )


class InvalidSelection(RklError):
    """Operator input at the disambiguation menu is not a valid choice."""

    def __init__(self, choice: str, valid: str):
        self.choice = choice
        self.valid = valid
        super().__init__(f"'{choice}' is not a valid option (choose one of: {valid})")


class ExecutionFailure(RklError):
    """A built command could not be run, or exited non-zero."""

    def __init__(self, command: str, returncode: Optional[int] = None, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or (f"exit code {returncode}" if returncode is not None else "not started")
        super().__init__(f"Command failed: {command} ({detail})")
