"""
MZF Tape Record Definitions
===========================

This module defines the data structures for Sharp MZ tape files (.mzf,
.m12, .mzt). A tape file is what the machine writes to cassette: a fixed
128-byte header block followed by the body the header describes.

Header Layout
-------------
    Offset 0:       File type
    Offset 1-17:    File name (Sharp-ASCII, terminated by $0D)
    Offset 18-19:   Body size (little-endian)
    Offset 20-21:   Load address (little-endian)
    Offset 22-23:   Execution address (little-endian)
    Offset 24-127:  Comment area, unused here

File Types
----------
- $01: Machine code
- $02: MZ-80 BASIC or other high level language
- $03: MZ-80 data file
- $04: MZ-700 data file
- $05: MZ-700 BASIC or other high level language
- $06: Chalkwell 3K BASIC

BASIC Dialects
--------------
Type $02 is shared by the MZ-80K SP-5025 BASIC and the MZ-80A SA-5510
BASIC. The two load their programs at different addresses, so the load
address in the header tells them apart. Type $05 is MZ-700 S-BASIC.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional

from mztape.charset import CharacterMapper, MachineVariant


# =============================================================================
# Header Constants
# =============================================================================

HEADER_SIZE = 128
NAME_OFFSET = 1
NAME_LENGTH = 17
NAME_TERMINATOR = 0x0D
SIZE_OFFSET = 18
LOAD_OFFSET = 20
EXEC_OFFSET = 22

# Program areas of the two type $02 BASICs
SP5025_LOAD_ADDRESS = 0x4806
SA5510_LOAD_ADDRESS = 0x505C

TAPE_EXTENSIONS = (".mzf", ".m12", ".mzt")


# =============================================================================
# Enumeration Types
# =============================================================================

class FileKind(IntEnum):
    """Tape file type from header byte 0."""
    UNKNOWN = 0x00
    MACHINE_CODE = 0x01
    BASIC_80 = 0x02
    DATA_80 = 0x03
    DATA_700 = 0x04
    BASIC_700 = 0x05
    CHALKWELL_3K = 0x06

    @classmethod
    def from_byte(cls, value: int) -> "FileKind":
        """Classify a file type byte; anything unlisted is UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    def get_description(self) -> str:
        """Human-readable description, as printed in the header report."""
        descriptions = {
            FileKind.MACHINE_CODE: "machine code",
            FileKind.BASIC_80: "MZ-80 BASIC or other high level language",
            FileKind.DATA_80: "MZ-80 data file",
            FileKind.DATA_700: "MZ-700 data file",
            FileKind.BASIC_700: "MZ-700 BASIC or other high level language",
            FileKind.CHALKWELL_3K: "Chalkwell 3K BASIC",
        }
        return descriptions.get(self, "unknown file type")


class Dialect(Enum):
    """Tokenized BASIC dialects the viewer can list."""
    SP5025 = "sp5025"
    SA5510 = "sa5510"
    SBASIC = "sbasic"
    NONE = "none"

    @property
    def machine_variant(self) -> MachineVariant:
        """The machine whose character set the dialect's programs use."""
        return {
            Dialect.SP5025: MachineVariant.MZ80K,
            Dialect.SA5510: MachineVariant.MZ80A,
            Dialect.SBASIC: MachineVariant.MZ700,
        }.get(self, MachineVariant.MZ80K)

    @property
    def display_name(self) -> str:
        return {
            Dialect.SP5025: "SP-5025 BASIC (MZ-80K)",
            Dialect.SA5510: "SA-5510 BASIC (MZ-80A)",
            Dialect.SBASIC: "S-BASIC (MZ-700)",
        }.get(self, "none")


def read_word(data: bytes, offset: int) -> int:
    """Read a little-endian 16-bit value."""
    return ((data[offset + 1] << 8) & 0xFF00) | data[offset]


# =============================================================================
# Tape Header
# =============================================================================

@dataclass(frozen=True)
class TapeHeader:
    """
    Parsed 128-byte tape header.

    Created once per tape file and never modified; decoders receive it
    explicitly rather than reading a shared buffer.

    Attributes:
        file_type: Raw type byte (kept so unknown types can be shown)
        file_kind: Classified type
        name: File name mapped through the character set
        name_bytes: File name bytes before the terminator
        body_size: Declared body length in bytes
        load_address: Where the body loads in memory
        exec_address: Entry point for machine code
        raw: The original 128 header bytes
    """
    file_type: int
    file_kind: FileKind
    name: str
    name_bytes: bytes
    body_size: int
    load_address: int
    exec_address: int
    raw: bytes = field(repr=False)

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        mapper: Optional[CharacterMapper] = None,
    ) -> "TapeHeader":
        """
        Parse a header from its 128 raw bytes.

        Any byte pattern is a valid header. Input shorter than
        HEADER_SIZE is zero-padded, longer input is cut.

        Args:
            data: Raw header bytes
            mapper: Character mapper for the file name

        Returns:
            TapeHeader instance
        """
        mapper = mapper or CharacterMapper()
        raw = bytes(data[:HEADER_SIZE]).ljust(HEADER_SIZE, b"\x00")

        name_field = raw[NAME_OFFSET:NAME_OFFSET + NAME_LENGTH]
        end = name_field.find(NAME_TERMINATOR)
        name_bytes = name_field if end < 0 else name_field[:end]

        return cls(
            file_type=raw[0],
            file_kind=FileKind.from_byte(raw[0]),
            name=mapper.map_bytes(name_bytes),
            name_bytes=name_bytes,
            body_size=read_word(raw, SIZE_OFFSET),
            load_address=read_word(raw, LOAD_OFFSET),
            exec_address=read_word(raw, EXEC_OFFSET),
            raw=raw,
        )

    @property
    def dialect(self) -> Dialect:
        """BASIC dialect implied by the file type and load address."""
        if self.file_kind == FileKind.BASIC_80:
            if self.load_address == SP5025_LOAD_ADDRESS:
                return Dialect.SP5025
            if self.load_address == SA5510_LOAD_ADDRESS:
                return Dialect.SA5510
            return Dialect.NONE
        if self.file_kind == FileKind.BASIC_700:
            return Dialect.SBASIC
        return Dialect.NONE

    @property
    def dialect_undetermined(self) -> bool:
        """True for an MZ-80 BASIC file loading at an unrecognised address."""
        return self.file_kind == FileKind.BASIC_80 and self.dialect == Dialect.NONE


# =============================================================================
# Tape File
# =============================================================================

@dataclass(frozen=True)
class TapeFile:
    """
    A complete tape file: header plus body.

    Attributes:
        header: Parsed header
        body: Body bytes; header.body_size long unless truncated
        source: Display name of the file (usually its path)
    """
    header: TapeHeader
    body: bytes = field(repr=False)
    source: str = ""

    @property
    def is_truncated(self) -> bool:
        """True if the file ended before the declared body size."""
        return len(self.body) < self.header.body_size

    @property
    def dialect(self) -> Dialect:
        return self.header.dialect
