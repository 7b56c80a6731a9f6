"""
Shared fixtures for the mztape tests.

Tape images are built in memory so each test states exactly the header
fields and body bytes it depends on.
"""

import pytest

from mztape.mzf import HEADER_SIZE


def build_tape(
    file_type: int = 0x02,
    name: bytes = b"TEST",
    body: bytes = b"",
    load_address: int = 0x4806,
    exec_address: int = 0x0000,
    body_size=None,
) -> bytes:
    """Build a complete tape image: 128-byte header followed by the body."""
    size = len(body) if body_size is None else body_size
    header = bytearray(HEADER_SIZE)
    header[0] = file_type
    name_field = (name + b"\x0d")[:17]
    header[1:1 + len(name_field)] = name_field
    header[18] = size & 0xFF
    header[19] = size >> 8
    header[20] = load_address & 0xFF
    header[21] = load_address >> 8
    header[22] = exec_address & 0xFF
    header[23] = exec_address >> 8
    return bytes(header) + body


@pytest.fixture
def make_tape():
    """Factory for in-memory tape images."""
    return build_tape


@pytest.fixture
def sp5025_program() -> bytes:
    """
    Two-line SP-5025 program:

        10 PRINT "Hi"
        20 GOTO 10
    """
    return bytes([
        0x0E, 0x48, 0x0A, 0x00,                     # link, line 10
        0x85, 0x20, 0x22, 0x48, 0xA6, 0x22, 0x0D,   # PRINT "Hi"
        0x18, 0x48, 0x14, 0x00,                     # link, line 20
        0x89, 0x20, 0x31, 0x30, 0x0D,               # GOTO 10
        0x00, 0x00,                                 # end of program
    ])
