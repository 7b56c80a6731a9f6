"""
MZF Tape File Handling
======================

Support for Sharp MZ series tape images (.mzf, .m12, .mzt): a 128-byte
header followed by the body it describes.

This module provides:
- **TapeHeader**: Parsed header fields and BASIC dialect detection
- **TapeFile**: Header plus body
- **read_tape / parse_tape**: Read tape images from disk or memory

Quick Start
-----------
    >>> from mztape.mzf import read_tape
    >>> tape = read_tape("hello.mzf")
    >>> print(tape.header.file_kind.get_description())
    >>> print(tape.dialect.display_name)

Copyright (c) 2026 mztape Contributors
"""

from mztape.mzf.records import (
    FileKind,
    Dialect,
    TapeHeader,
    TapeFile,
    HEADER_SIZE,
    NAME_LENGTH,
    SP5025_LOAD_ADDRESS,
    SA5510_LOAD_ADDRESS,
    TAPE_EXTENSIONS,
)
from mztape.mzf.parser import (
    parse_header,
    parse_tape,
    read_tape,
    read_tape_stream,
    format_header_report,
    format_header_dump,
)

__all__ = [
    "FileKind",
    "Dialect",
    "TapeHeader",
    "TapeFile",
    "HEADER_SIZE",
    "NAME_LENGTH",
    "SP5025_LOAD_ADDRESS",
    "SA5510_LOAD_ADDRESS",
    "TAPE_EXTENSIONS",
    "parse_header",
    "parse_tape",
    "read_tape",
    "read_tape_stream",
    "format_header_report",
    "format_header_dump",
]
