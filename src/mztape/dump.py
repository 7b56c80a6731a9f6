"""
Hex Dump Formatting
===================

Renders tape data as rows of hex byte values, optionally followed by a
gutter holding the same bytes through the Sharp-ASCII character mapper.

Example row (body dump):
    48 45 4c 4c 4f 0d 00 00 00 00 00 00 00 00 00 00     HELLO...........

A short final row is padded with blank cells so its gutter lines up
with the rows above.
"""

from typing import List, Optional

from mztape.charset import CharacterMapper

# Bytes per dump row
DISPLAYLEN = 16

CELL_WIDTH = 3
GUTTER = "    "


def format_hex_cells(chunk: bytes) -> str:
    """Format bytes as lower-case two-digit hex cells, each followed by a space."""
    return "".join(f"{b:02x} " for b in chunk)


def format_hex_grid(data: bytes, width: int = DISPLAYLEN) -> List[str]:
    """Format bytes as a hex-only grid, `width` bytes per row."""
    return [
        format_hex_cells(data[i:i + width]) for i in range(0, len(data), width)
    ]


def format_hex_rows(
    data: bytes,
    mapper: Optional[CharacterMapper] = None,
    width: int = DISPLAYLEN,
) -> List[str]:
    """
    Format bytes as hex cells with a mapped-character gutter.

    Args:
        data: Bytes to dump
        mapper: Character mapper for the gutter
        width: Bytes per row

    Returns:
        One string per row
    """
    mapper = mapper or CharacterMapper()
    rows = []
    for i in range(0, len(data), width):
        chunk = data[i:i + width]
        padding = " " * (CELL_WIDTH * (width - len(chunk)))
        rows.append(f"{format_hex_cells(chunk)}{padding}{GUTTER}{mapper.map_bytes(chunk)}")
    return rows
