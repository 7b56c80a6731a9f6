"""
MZ Tape Error Hierarchy
=======================

This module defines the exception hierarchy for the mztape package.
All exceptions inherit from MZTapeError, allowing callers to catch all
package-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
MZTapeError (base)
├── UsageError - wrong command-line invocation
└── TapeFileError (tape file access)
    └── FileOpenError - tape file missing or unreadable

Design Philosophy
-----------------
Only the outer surface can fail. Once a tape file has been read into
memory, header parsing and BASIC detokenization always produce
best-effort output: tape images are historical, frequently truncated or
hand-made, so anomalies degrade to placeholder glyphs and notices
instead of exceptions.
"""

from pathlib import Path
from typing import Optional, Union


# =============================================================================
# Base Exception Class
# =============================================================================

class MZTapeError(Exception):
    """
    Base exception for all mztape errors.

        try:
            tape = read_tape("game.mzf")
        except MZTapeError as e:
            print(f"Error: {e}")
    """
    pass


class UsageError(MZTapeError):
    """
    Wrong command-line invocation.

    Raised when the viewer is called without exactly one tape file
    argument. The message carries the usage line to print.
    """

    def __init__(self, usage: str):
        self.usage = usage
        super().__init__(usage)


# =============================================================================
# Tape File Exceptions
# =============================================================================

class TapeFileError(MZTapeError):
    """Base exception for tape file access errors."""
    pass


class FileOpenError(TapeFileError):
    """
    Tape file cannot be opened for reading.

    Raised when:
    - The path does not exist
    - The path is a directory
    - Permission denied

    Attributes:
        path: The path that could not be opened
        reason: Underlying OS error text (optional)
    """

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path} not found")
