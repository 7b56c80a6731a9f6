"""
MZF Tape File Parser
====================

This module reads Sharp MZ tape files and splits them into the parsed
header and the body the header declares.

Parsing never rejects a file. Every 128-byte pattern is a syntactically
valid header; an unrecognised type byte classifies as FileKind.UNKNOWN.
A file that ends early is kept as far as it goes and flagged as
truncated, so the viewer can still show what is there.

Usage Examples
--------------
Reading a tape file:
    >>> from mztape.mzf import read_tape
    >>> tape = read_tape("hello.mzf")
    >>> print(tape.header.name, tape.header.file_kind.get_description())

Parsing bytes already in memory:
    >>> header = parse_header(raw[:128])
    >>> print(f"Load address: ${header.load_address:04X}")
"""

from pathlib import Path
from typing import BinaryIO, List, Optional, Union
import logging

from mztape.charset import CharacterMapper
from mztape.dump import DISPLAYLEN, format_hex_grid
from mztape.errors import FileOpenError
from mztape.mzf.records import HEADER_SIZE, TAPE_EXTENSIONS, TapeFile, TapeHeader

# Logger for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Header Parsing
# =============================================================================

def parse_header(
    raw: bytes,
    display_name: str = "",
    mapper: Optional[CharacterMapper] = None,
) -> TapeHeader:
    """
    Parse a 128-byte tape header.

    Args:
        raw: Header bytes; short input is zero-padded
        display_name: Name of the source, used only for log messages
        mapper: Character mapper for the file name

    Returns:
        TapeHeader instance
    """
    if len(raw) < HEADER_SIZE:
        logger.warning(
            f"{display_name or 'tape'}: header is {len(raw)} bytes, "
            f"expected {HEADER_SIZE}; padding with zeros"
        )

    header = TapeHeader.from_bytes(raw, mapper)
    logger.debug(
        f"Parsed header '{header.name}': type 0x{header.file_type:02X}, "
        f"size {header.body_size}, load ${header.load_address:04X}, "
        f"exec ${header.exec_address:04X}"
    )
    return header


def parse_tape(
    data: bytes,
    display_name: str = "",
    mapper: Optional[CharacterMapper] = None,
) -> TapeFile:
    """
    Split a complete tape image into header and body.

    Bytes beyond the declared body size are ignored.

    Args:
        data: The whole tape file
        display_name: Name of the source, kept on the TapeFile
        mapper: Character mapper for the file name

    Returns:
        TapeFile instance
    """
    header = parse_header(data[:HEADER_SIZE], display_name, mapper)
    body = bytes(data[HEADER_SIZE:HEADER_SIZE + header.body_size])
    return _make_tape(header, body, display_name)


def read_tape(
    filepath: Union[str, Path],
    mapper: Optional[CharacterMapper] = None,
) -> TapeFile:
    """
    Read a tape file from disk.

    The header is read first and the body only after it, sized by the
    header. The file is closed on every path out.

    Args:
        filepath: Path to the tape file
        mapper: Character mapper for the file name

    Returns:
        TapeFile instance

    Raises:
        FileOpenError: If the file cannot be opened for reading
    """
    display_name = str(filepath)
    if Path(filepath).suffix.lower() not in TAPE_EXTENSIONS:
        logger.info(
            f"{display_name}: extension is not one of {', '.join(TAPE_EXTENSIONS)}; "
            f"reading it as a tape file anyway"
        )

    try:
        stream = open(filepath, "rb")
    except OSError as e:
        logger.debug(f"Cannot open {display_name}: {e}")
        raise FileOpenError(display_name, reason=str(e)) from e

    with stream:
        return read_tape_stream(stream, display_name, mapper)


def read_tape_stream(
    stream: BinaryIO,
    display_name: str = "",
    mapper: Optional[CharacterMapper] = None,
) -> TapeFile:
    """Read header then body from an open binary stream."""
    header = parse_header(stream.read(HEADER_SIZE), display_name, mapper)
    body = stream.read(header.body_size)
    return _make_tape(header, body, display_name)


def _make_tape(header: TapeHeader, body: bytes, display_name: str) -> TapeFile:
    tape = TapeFile(header=header, body=body, source=display_name)
    if tape.is_truncated:
        logger.warning(
            f"{display_name or 'tape'}: body truncated, "
            f"declared {header.body_size} bytes, got {len(body)}"
        )
    return tape


# =============================================================================
# Header Display
# =============================================================================

def format_header_report(
    header: TapeHeader,
    display_name: str = "",
    mapper: Optional[CharacterMapper] = None,
) -> List[str]:
    """
    Format the bordered header summary.

    The file name is re-mapped when a mapper is given, so it can follow
    the machine variant chosen after the header was parsed.

    Example output:
        Tape header information for hello.mzf
        =====================================

        File type: 0x05 - MZ-700 BASIC or other high level language
        File name: HELLO
        File size: 0x0123 (291) bytes
        Load addr: 0x6bcf (27599)
        Exec addr: 0x0000 (0)
    """
    name = mapper.map_bytes(header.name_bytes) if mapper else header.name
    title = f"Tape header information for {display_name}"
    return [
        title,
        "=" * len(title),
        "",
        f"File type: 0x{header.file_type:02x} - {header.file_kind.get_description()}",
        f"File name: {name}",
        f"File size: 0x{header.body_size:04x} ({header.body_size}) bytes",
        f"Load addr: 0x{header.load_address:04x} ({header.load_address})",
        f"Exec addr: 0x{header.exec_address:04x} ({header.exec_address})",
    ]


def format_header_dump(header: TapeHeader, width: int = DISPLAYLEN) -> List[str]:
    """Format all 128 header bytes as a hex grid, 16 per row."""
    title = f"Full {HEADER_SIZE} byte header in hexadecimal"
    return [title, "-" * len(title), ""] + format_hex_grid(header.raw, width)
