"""
S-BASIC Detokenizer
===================

S-BASIC is the MZ-700 BASIC (file type $05). Lines end with $00.

Token Encoding:
    Statements, operators and a few functions are single bytes in
    $80-$FD. Two lead bytes select extended tables:

        $FE xx - further statements (COLOR, MUSIC, ...)
        $FF xx - functions (SIN, LEFT$, ...)

Inline Operands:
    S-BASIC parses constants and variable names when a line is entered
    and stores them in binary. These control bytes introduce them:

        $03 n name      - string variable, listed as name$
        $05 n name flt  - numeric variable followed by a packed float
        $15 flt         - numeric constant, 5-byte packed float
        $11 lo hi       - hexadecimal constant, listed as $HHLL
        $0B lo hi       - line number (GOTO, GOSUB, ...)

Every lead and control byte consumes exactly its own operands; none
falls through into the literal path.

Copyright (c) 2026 mztape Contributors
"""

from typing import Tuple

from mztape.basic.decoder import (
    PI,
    TRUNCATED,
    UP_ARROW,
    BasicDecoder,
    DecoderState,
    TokenTable,
)
from mztape.basic.floats import decode_float
from mztape.mzf.records import Dialect


# =============================================================================
# Inline Operand Markers
# =============================================================================

STRING_VARIABLE = 0x03
NUMERIC_VARIABLE = 0x05
LINE_REFERENCE = 0x0B
HEX_CONSTANT = 0x11
FLOAT_CONSTANT = 0x15

STATEMENT_LEAD = 0xFE
FUNCTION_LEAD = 0xFF

SBASIC_REM = 0x97


# =============================================================================
# S-BASIC Token Tables
# =============================================================================

SBASIC_TOKENS: TokenTable = {
    # Statements
    0x80: "GOTO",
    0x81: "GOSUB",
    0x83: "RUN",
    0x84: "RETURN",
    0x85: "RESTORE",
    0x86: "RESUME",
    0x87: "LIST",
    0x89: "DELETE",
    0x8A: "RENUM",
    0x8B: "AUTO",
    0x8D: "FOR",
    0x8E: "NEXT",
    0x8F: "PRINT",
    0x91: "INPUT",
    0x93: "IF",
    0x94: "DATA",
    0x95: "READ",
    0x96: "DIM",
    0x97: "REM",
    0x98: "END",
    0x99: "STOP",
    0x9A: "CONT",
    0x9B: "CLS",
    0x9D: "ON",
    0x9E: "LET",
    0x9F: "NEW",
    0xA0: "POKE",
    0xA1: "OFF",
    0xA2: "MODE",
    0xA3: "SKIP",
    0xA4: "PLOT",
    0xA5: "LINE",
    0xA6: "RLINE",
    0xA7: "MOVE",
    0xA8: "RMOVE",
    0xA9: "TRON",
    0xAA: "TROFF",
    0xAB: "INP#",
    0xAD: "GET",
    0xAE: "PCOLOR",
    0xAF: "PHOME",
    0xB0: "HSET",
    0xB1: "GPRINT",
    0xB2: "KEY",
    0xB3: "AXIS",
    0xB4: "LOAD",
    0xB5: "SAVE",
    0xB6: "MERGE",
    0xB8: "CONSOLE",
    0xBA: "OUT#",
    0xBB: "CIRCLE",
    0xBC: "TEST",
    0xBD: "PAGE",
    0xC0: "ERASE",
    0xC1: "ERROR",
    0xC3: "USR",
    0xC4: "BYE",
    0xC7: "DEF",
    0xCE: "WOPEN",
    0xCF: "CLOSE",
    0xD0: "ROPEN",
    0xD2: PI,
    0xD9: "KILL",

    # Statement modifiers
    0xE0: "TO",
    0xE1: "STEP",
    0xE2: "THEN",
    0xE3: "USING",
    0xE6: "TAB",
    0xE7: "SPC",

    # Logical operators
    0xEB: "OR",
    0xEC: "AND",

    # Comparison
    0xEE: "><",
    0xEF: "<>",
    0xF0: "=<",
    0xF1: "<=",
    0xF2: "=>",
    0xF3: ">=",
    0xF4: "=",
    0xF5: ">",
    0xF6: "<",

    # Arithmetic
    0xF7: "+",
    0xF8: "-",
    0xFB: "/",
    0xFC: "*",
    0xFD: UP_ARROW,
}

# Second byte after the $FE lead
SBASIC_STATEMENTS: TokenTable = {
    0x81: "SET",
    0x82: "RESET",
    0x83: "COLOR",
    0xA2: "MUSIC",
    0xA3: "TEMPO",
    0xA4: "CURSOR",
    0xA5: "VERIFY",
    0xA6: "CLR",
    0xA7: "LIMIT",
    0xAE: "BOOT",
}

# Second byte after the $FF lead
SBASIC_FUNCTIONS: TokenTable = {
    0x80: "INT",
    0x81: "ABS",
    0x82: "SIN",
    0x83: "COS",
    0x84: "TAN",
    0x85: "LN",
    0x86: "EXP",
    0x87: "SQR",
    0x88: "RND",
    0x89: "PEEK",
    0x8A: "ATN",
    0x8B: "SGN",
    0x8C: "LOG",
    0x8E: "PAI",
    0x8F: "RAD",
    0x95: "EOF",
    0x9E: "JOY",
    0xA0: "CHR$",
    0xA2: "HEX$",
    0xAB: "ASC",
    0xAC: "LEN",
    0xAD: "VAL",
    0xB3: "ERN",
    0xB4: "ERL",
    0xB5: "SIZE",
    0xBA: "LEFT$",
    0xBB: "RIGHT$",
    0xBC: "MID$",
    0xC3: "STRING$",
    0xC4: "TI$",
    0xC7: "FN",
}

EXTENDED_TABLES = {
    STATEMENT_LEAD: SBASIC_STATEMENTS,
    FUNCTION_LEAD: SBASIC_FUNCTIONS,
}


class SBasicDecoder(BasicDecoder):
    """Detokenizer for MZ-700 S-BASIC."""

    dialect = Dialect.SBASIC
    terminator = 0x00
    tokens = SBASIC_TOKENS
    rem_tokens = frozenset({SBASIC_REM})

    def _decode_normal(self, body: bytes, offset: int) -> Tuple[str, int, DecoderState]:
        byte = body[offset]

        if byte in EXTENDED_TABLES:
            text, size = self._decode_extended(body, offset)
            return text, size, DecoderState.NORMAL
        if byte == STRING_VARIABLE:
            text, size, complete = self._decode_variable(body, offset)
            if not complete:
                return text, size, DecoderState.NORMAL
            return text + "$", size, DecoderState.NORMAL
        if byte == NUMERIC_VARIABLE:
            text, size, complete = self._decode_variable(body, offset)
            if not complete:
                return text, size, DecoderState.NORMAL
            number = decode_float(body, offset + size)
            return text + number.text, size + number.size, DecoderState.NORMAL
        if byte == FLOAT_CONSTANT:
            number = decode_float(body, offset + 1)
            return number.text, 1 + number.size, DecoderState.NORMAL
        if byte == HEX_CONSTANT:
            return self._decode_word(body, offset, hexadecimal=True)
        if byte == LINE_REFERENCE:
            return self._decode_word(body, offset, hexadecimal=False)

        return super()._decode_normal(body, offset)

    def _decode_extended(self, body: bytes, offset: int) -> Tuple[str, int]:
        """Decode a lead byte and its extended table code."""
        if offset + 1 >= len(body):
            return TRUNCATED, 1
        table = EXTENDED_TABLES[body[offset]]
        keyword = table.get(body[offset + 1])
        if keyword is None:
            return f"UNKNOWN {body[offset]:02X} TOKEN", 2
        return self.render(keyword), 2

    def _decode_variable(self, body: bytes, offset: int) -> Tuple[str, int, bool]:
        """
        Decode a length-prefixed variable name.

        A name cut off by the end of the body ends in TRUNCATED and
        consumes the rest of the body.

        Returns:
            (name, bytes consumed including the marker and length,
            whether the whole name was present)
        """
        if offset + 1 >= len(body):
            return TRUNCATED, len(body) - offset, False
        length = body[offset + 1]
        name = body[offset + 2:offset + 2 + length]
        if len(name) < length:
            return self.mapper.map_bytes(name) + TRUNCATED, len(body) - offset, False
        return self.mapper.map_bytes(name), 2 + length, True

    def _decode_word(
        self,
        body: bytes,
        offset: int,
        hexadecimal: bool,
    ) -> Tuple[str, int, DecoderState]:
        """Decode a marker followed by a little-endian 16-bit operand."""
        if offset + 2 >= len(body):
            return TRUNCATED, len(body) - offset, DecoderState.NORMAL
        lo = body[offset + 1]
        hi = body[offset + 2]
        if not hexadecimal:
            return str((hi << 8) | lo), 3, DecoderState.NORMAL
        if hi:
            return f"${hi:02X}{lo:02X}", 3, DecoderState.NORMAL
        return f"${lo:X}", 3, DecoderState.NORMAL
