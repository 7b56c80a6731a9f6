"""
mztape - Sharp MZ Tape File Viewer
==================================

This package reads the tape files of the Sharp MZ-80K, MZ-80A and MZ-700
(.mzf, .m12, .mzt) and lists the tokenized BASIC programs they hold.

A tape file is a 128-byte header (file type, name, size, load and
execution addresses) followed by the body. For BASIC files the body is a
tokenized program in one of three incompatible dialects; the header's
file type and load address say which.

Main Components
---------------
- **charset**: Sharp-ASCII to Unicode mapping, per machine variant
- **mzf**: Tape header parsing and tape file reading
- **basic**: SP-5025, SA-5510 and S-BASIC detokenizers
- **dump**: Hex and character dumps
- **report**: The viewer's full report
- **cli**: The mzfview command

Quick Start
-----------
List a BASIC program:
    >>> from mztape import read_tape, detokenize
    >>> tape = read_tape("hello.mzf")
    >>> print(detokenize(tape.body, tape.dialect))

Or use the command-line tool:
    $ mzfview hello.mzf

Copyright (c) 2026 mztape Contributors
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from mztape.errors import (
    MZTapeError,
    UsageError,
    TapeFileError,
    FileOpenError,
)
from mztape.charset import (
    CharacterMapper,
    MachineVariant,
    RenderMode,
    map_char,
    map_bytes,
)
from mztape.mzf import (
    FileKind,
    Dialect,
    TapeHeader,
    TapeFile,
    parse_header,
    parse_tape,
    read_tape,
)
from mztape.basic import (
    BasicDecoder,
    DecoderState,
    ListingLine,
    SP5025Decoder,
    SA5510Decoder,
    SBasicDecoder,
    decode_float,
    get_decoder,
    detokenize,
)
from mztape.dump import DISPLAYLEN, format_hex_rows
from mztape.report import ViewerOptions, render_report

__all__ = [
    "__version__",
    # Errors
    "MZTapeError",
    "UsageError",
    "TapeFileError",
    "FileOpenError",
    # Character set
    "CharacterMapper",
    "MachineVariant",
    "RenderMode",
    "map_char",
    "map_bytes",
    # Tape files
    "FileKind",
    "Dialect",
    "TapeHeader",
    "TapeFile",
    "parse_header",
    "parse_tape",
    "read_tape",
    # BASIC
    "BasicDecoder",
    "DecoderState",
    "ListingLine",
    "SP5025Decoder",
    "SA5510Decoder",
    "SBasicDecoder",
    "decode_float",
    "get_decoder",
    "detokenize",
    # Output
    "DISPLAYLEN",
    "format_hex_rows",
    "ViewerOptions",
    "render_report",
]
