"""
SP-5025 BASIC Detokenizer
=========================

SP-5025 is the MZ-80K tape BASIC. Programs load at $4806 and are saved
with file type $02.

All keywords are single bytes in $80-$DB. Lines end with $0D. Function
tokens include their opening parenthesis.
"""

from mztape.basic.decoder import UP_ARROW, BasicDecoder, TokenTable
from mztape.mzf.records import Dialect


# =============================================================================
# SP-5025 Token Table
# =============================================================================

SP5025_REM = 0x80

SP5025_TOKENS: TokenTable = {
    # Statements
    0x80: "REM",
    0x81: "DATA",
    0x82: "LIST",
    0x83: "RUN",
    0x84: "NEW",
    0x85: "PRINT",
    0x86: "LET",
    0x87: "FOR",
    0x88: "IF",
    0x89: "GOTO",
    0x8A: "READ",
    0x8B: "GOSUB",
    0x8C: "RETURN",
    0x8D: "NEXT",
    0x8E: "STOP",
    0x8F: "END",
    0x90: "ON",
    0x91: "LOAD",
    0x92: "SAVE",
    0x93: "VERIFY",
    0x94: "POKE",
    0x95: "DIM",
    0x96: "DEF FN",
    0x97: "INPUT",
    0x98: "RESTORE",
    0x99: "CLR",
    0x9A: "MUSIC",
    0x9B: "TEMPO",
    0x9C: "USR(",
    0x9D: "WOPEN",
    0x9E: "ROPEN",
    0x9F: "CLOSE",
    0xA0: "BYE",
    0xA1: "LIMIT",
    0xA2: "CONT",
    0xA3: "SET",
    0xA4: "RESET",
    0xA5: "GET",
    0xA6: "INP#",
    0xA7: "OUT#",

    # Statement modifiers
    0xAD: "THEN",
    0xAE: "TO",
    0xAF: "STEP",

    # Operators
    0xB0: "><",
    0xB1: "<>",
    0xB2: "=<",
    0xB3: "<=",
    0xB4: "=>",
    0xB5: ">=",
    0xB6: "=",
    0xB7: ">",
    0xB8: "<",
    0xB9: "AND",
    0xBA: "OR",
    0xBB: "NOT",
    0xBC: "+",
    0xBD: "-",
    0xBE: "*",
    0xBF: "/",

    # String functions
    0xC0: "LEFT$(",
    0xC1: "RIGHT$(",
    0xC2: "MID$(",
    0xC3: "LEN(",
    0xC4: "CHR$(",
    0xC5: "STR$(",
    0xC6: "ASC(",
    0xC7: "VAL(",
    0xC8: "PEEK(",
    0xC9: "TAB(",
    0xCA: "SPC(",
    0xCB: "SIZE",
    0xCF: UP_ARROW,

    # Numeric functions
    0xD0: "RND(",
    0xD1: "SIN(",
    0xD2: "COS(",
    0xD3: "TAN(",
    0xD4: "ATN(",
    0xD5: "EXP(",
    0xD6: "INT(",
    0xD7: "LOG(",
    0xD8: "LN(",
    0xD9: "ABS(",
    0xDA: "SGN(",
    0xDB: "SQR(",
}


class SP5025Decoder(BasicDecoder):
    """Detokenizer for MZ-80K SP-5025 BASIC."""

    dialect = Dialect.SP5025
    terminator = 0x0D
    tokens = SP5025_TOKENS
    rem_tokens = frozenset({SP5025_REM})
