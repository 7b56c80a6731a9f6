"""
Tokenized BASIC Decoder
=======================

Common state machine behind the three Sharp BASIC detokenizers.

Program Layout:
    Every dialect stores a program as a run of lines:

        Byte 0-1:  Link to the next line (ignored)
        Byte 2-3:  Line number, little-endian
        Byte 4+:   Tokens and literal characters
        Last:      Line terminator ($0D, or $00 for S-BASIC)

    Keywords are single bytes from the dialect's token table, or a lead
    byte followed by a second byte in dialects with extended tables.
    Anything that is not a token is a Sharp-ASCII character.

Decoder States:
    LINE_NUMBER - collecting the 4 link and line number bytes
    NORMAL      - tokens and literals
    STRING      - inside "...", every byte is a character
    REMARK      - after REM, every byte is a character up to ':'

    A terminator byte ends the line only once all 4 line header bytes
    have been read, since $0D and $00 also occur inside those bytes.
    An open string or remark is closed by the line end.

Subclasses provide the token table and override _decode_normal() for
lead bytes and inline operands. Decoding never raises: unknown codes
become visible placeholders and a truncated body just ends the listing.

Copyright (c) 2026 mztape Contributors
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, Dict, FrozenSet, List, Optional, Tuple, Union
import logging

from mztape.charset import CharacterMapper
from mztape.mzf.records import Dialect

# Logger for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

LINE_HEADER_SIZE = 4
QUOTE = 0x22
COLON = 0x3A

# Sharp-ASCII codes used as keyword glyphs
UP_ARROW = 0x5E
PI = 0xFF

# Shown where an operand runs past the end of the body
TRUNCATED = "?"

# A token is keyword text, or a Sharp-ASCII code drawn through the mapper
TokenValue = Union[str, int]
TokenTable = Dict[int, TokenValue]


class DecoderState(Enum):
    """Scanner state within one decode pass."""
    LINE_NUMBER = auto()
    NORMAL = auto()
    STRING = auto()
    REMARK = auto()


@dataclass
class ListingLine:
    """
    One detokenized program line.

    Attributes:
        number: BASIC line number
        text: Detokenized line body
        offset: Body offset of the line's first header byte
        terminated: False for a final line cut off before its terminator
    """
    number: int
    text: str
    offset: int = 0
    terminated: bool = True

    def __str__(self) -> str:
        return f" {self.number} {self.text}"


# =============================================================================
# Base Decoder
# =============================================================================

class BasicDecoder:
    """
    Table-driven detokenizer for one BASIC dialect.

    Usage:
        decoder = SP5025Decoder()
        for line in decoder.decode(tape.body):
            print(line)
    """

    dialect: ClassVar[Dialect] = Dialect.NONE
    terminator: ClassVar[int] = 0x0D
    tokens: ClassVar[TokenTable] = {}
    rem_tokens: ClassVar[FrozenSet[int]] = frozenset()

    def __init__(self, mapper: Optional[CharacterMapper] = None):
        """
        Args:
            mapper: Character mapper for literals; defaults to the
                dialect's own machine variant
        """
        self.mapper = mapper or CharacterMapper(variant=self.dialect.machine_variant)
        self.state = DecoderState.LINE_NUMBER

    def render(self, token: TokenValue) -> str:
        """Render a token table value."""
        if isinstance(token, int):
            return self.mapper(token)
        return token

    def decode(self, body: bytes) -> List[ListingLine]:
        """
        Detokenize a program body.

        Args:
            body: The tape body holding the tokenized program

        Returns:
            ListingLine per program line, in body order
        """
        lines: List[ListingLine] = []
        parts: List[str] = []
        line_header = bytearray()
        line_start = 0
        self.state = DecoderState.LINE_NUMBER

        offset = 0
        while offset < len(body):
            byte = body[offset]

            if byte == self.terminator and len(line_header) == LINE_HEADER_SIZE:
                lines.append(ListingLine(
                    number=self._line_number(line_header),
                    text="".join(parts),
                    offset=line_start,
                ))
                parts.clear()
                line_header.clear()
                self.state = DecoderState.LINE_NUMBER
                offset += 1
                line_start = offset
                continue

            if self.state is DecoderState.STRING:
                parts.append(self.mapper(byte))
                if byte == QUOTE:
                    self.state = DecoderState.NORMAL
                offset += 1

            elif self.state is DecoderState.REMARK:
                parts.append(self.mapper(byte))
                if byte == COLON:
                    self.state = DecoderState.NORMAL
                offset += 1

            elif self.state is DecoderState.LINE_NUMBER:
                line_header.append(byte)
                if len(line_header) == LINE_HEADER_SIZE:
                    self.state = DecoderState.NORMAL
                offset += 1

            else:
                text, size, self.state = self._decode_normal(body, offset)
                parts.append(text)
                offset += size

        if len(line_header) == LINE_HEADER_SIZE:
            lines.append(ListingLine(
                number=self._line_number(line_header),
                text="".join(parts),
                offset=line_start,
                terminated=False,
            ))

        logger.debug(f"{self.dialect.display_name}: decoded {len(lines)} lines from {len(body)} bytes")
        return lines

    def decode_to_text(self, body: bytes) -> str:
        """Detokenize a program body into listing text, one line per row."""
        return "".join(
            f"{line}\n" if line.terminated else str(line)
            for line in self.decode(body)
        )

    @staticmethod
    def _line_number(line_header: bytes) -> int:
        return ((line_header[3] << 8) | line_header[2]) & 0xFFFF

    def _decode_normal(
        self,
        body: bytes,
        offset: int,
    ) -> Tuple[str, int, DecoderState]:
        """
        Decode the item at `offset` in NORMAL state.

        Returns:
            (text, bytes consumed, next state)
        """
        byte = body[offset]

        if byte == QUOTE:
            return '"', 1, DecoderState.STRING

        token = self.tokens.get(byte)
        if token is not None:
            if byte in self.rem_tokens:
                return self.render(token), 1, DecoderState.REMARK
            return self.render(token), 1, DecoderState.NORMAL

        return self.mapper(byte), 1, DecoderState.NORMAL
