"""Exception types surfaced by the scanner and the terraform runner.

Interactive state operations never raise; only the I/O collaborators do.
"""

from __future__ import annotations


class TfSelectError(Exception):
    """Base class for fatal tfselect errors reported on stderr."""


class ScanFailure(TfSelectError):
    """Raised when ``.tf`` files cannot be listed or read."""


class ExecutionFailure(TfSelectError):
    """Raised when terraform cannot be started or exits non-zero."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode
