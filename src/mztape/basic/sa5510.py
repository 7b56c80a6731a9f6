"""
SA-5510 BASIC Detokenizer
=========================

SA-5510 is the MZ-80A tape BASIC. Programs load at $505C and share file
type $02 with SP-5025, so the load address picks the dialect.

Token Encoding:
    Statements are two bytes: the lead byte $80 followed by a statement
    code ($80 $80 is REM). Operators and functions are single bytes.
    Lines end with $0D.

    Function tokens list with their opening parenthesis. $A4 lists as
    "CHR$(" to match the other functions. This deliberately differs from
    the C mzfview lister, which prints "CHR$" alone.
"""

from typing import Tuple

from mztape.basic.decoder import (
    TRUNCATED,
    UP_ARROW,
    BasicDecoder,
    DecoderState,
    TokenTable,
)
from mztape.mzf.records import Dialect


# =============================================================================
# SA-5510 Token Tables
# =============================================================================

STATEMENT_LEAD = 0x80
SA5510_REM = 0x80

# Second byte after the $80 lead
SA5510_STATEMENTS: TokenTable = {
    0x80: "REM",
    0x81: "DATA",
    0x84: "READ",
    0x85: "LIST",
    0x86: "RUN",
    0x87: "NEW",
    0x88: "PRINT",
    0x89: "LET",
    0x8A: "FOR",
    0x8B: "IF",
    0x8C: "THEN",
    0x8D: "GOTO",
    0x8E: "GOSUB",
    0x8F: "RETURN",
    0x90: "NEXT",
    0x91: "STOP",
    0x92: "END",
    0x94: "ON",
    0x95: "LOAD",
    0x96: "SAVE",
    0x97: "VERIFY",
    0x98: "POKE",
    0x99: "DIM",
    0x9A: "DEF FN",
    0x9B: "INPUT",
    0x9C: "RESTORE",
    0x9D: "CLR",
    0x9E: "MUSIC",
    0x9F: "TEMPO",
    0xA0: "USR(",
    0xA1: "WOPEN",
    0xA2: "ROPEN",
    0xA3: "CLOSE",
    0xA4: "MON",
    0xA5: "LIMIT",
    0xA6: "CONT",
    0xA7: "GET",
    0xA8: "INP@",
    0xA9: "OUT@",
    0xAA: "CURSOR",
    0xAB: "SET",
    0xAC: "RESET",
    0xB3: "AUTO",
    0xB6: "COPY/P",
    0xB7: "PAGE/P",
}

SA5510_TOKENS: TokenTable = {
    # Arithmetic
    0x2A: "*",
    0x2B: "+",
    0x2D: "-",
    0x2F: "/",
    0x5E: UP_ARROW,

    # Comparison
    0x83: "><",
    0x84: "<>",
    0x85: "=<",
    0x86: "<=",
    0x87: "=>",
    0x88: ">=",
    0x89: "=",
    0x8A: ">",
    0x8B: "<",

    # Statement modifiers
    0x9E: "TO",
    0x9F: "STEP",

    # String functions
    0xA0: "LEFT$(",
    0xA1: "RIGHT$(",
    0xA2: "MID$(",
    0xA3: "LEN(",
    0xA4: "CHR$(",
    0xA5: "STR$(",
    0xA6: "ASC(",
    0xA7: "VAL(",
    0xA8: "PEEK(",
    0xA9: "TAB(",
    0xAA: "SPACE$(",
    0xAB: "SIZE",
    0xAF: "STRING$(",
    0xB1: "CHARACTER$(",
    0xB2: "CSR",

    # Numeric functions
    0xC0: "RND(",
    0xC1: "SIN(",
    0xC2: "COS(",
    0xC3: "TAN(",
    0xC4: "ATN(",
    0xC5: "EXP(",
    0xC6: "INT(",
    0xC7: "LOG(",
    0xC8: "LN(",
    0xC9: "ABS(",
    0xCA: "SGN(",
    0xCB: "SQR(",
}


class SA5510Decoder(BasicDecoder):
    """Detokenizer for MZ-80A SA-5510 BASIC."""

    dialect = Dialect.SA5510
    terminator = 0x0D
    tokens = SA5510_TOKENS

    def _decode_normal(self, body: bytes, offset: int) -> Tuple[str, int, DecoderState]:
        if body[offset] != STATEMENT_LEAD:
            return super()._decode_normal(body, offset)

        if offset + 1 >= len(body):
            return TRUNCATED, 1, DecoderState.NORMAL

        code = body[offset + 1]
        keyword = SA5510_STATEMENTS.get(code)
        if keyword is None:
            return "UNKNOWN 80 TOKEN", 2, DecoderState.NORMAL
        if code == SA5510_REM:
            return self.render(keyword), 2, DecoderState.REMARK
        return self.render(keyword), 2, DecoderState.NORMAL
