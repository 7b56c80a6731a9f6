"""
Sharp BASIC Detokenizers
========================

This module turns tokenized BASIC programs saved on tape back into
listings, for the three Sharp MZ BASIC dialects:

- SP-5025 (MZ-80K): single-byte tokens, lines end with $0D
- SA-5510 (MZ-80A): $80-prefixed statements, lines end with $0D
- S-BASIC (MZ-700): $FE/$FF-prefixed extended tokens, binary constants,
  lines end with $00

Usage:
    from mztape.basic import get_decoder
    from mztape.mzf import read_tape

    tape = read_tape("game.mzf")
    decoder = get_decoder(tape.dialect)
    if decoder is not None:
        for line in decoder.decode(tape.body):
            print(line)

Copyright (c) 2026 mztape Contributors
"""

from .decoder import BasicDecoder, DecoderState, ListingLine
from .floats import DecodedFloat, decode_float, format_float
from .sp5025 import SP5025Decoder, SP5025_TOKENS
from .sa5510 import SA5510Decoder, SA5510_TOKENS, SA5510_STATEMENTS
from .sbasic import SBasicDecoder, SBASIC_TOKENS, SBASIC_STATEMENTS, SBASIC_FUNCTIONS
from .detokenizer import DECODERS, get_decoder, detokenize

__all__ = [
    "BasicDecoder",
    "DecoderState",
    "ListingLine",
    "DecodedFloat",
    "decode_float",
    "format_float",
    "SP5025Decoder",
    "SP5025_TOKENS",
    "SA5510Decoder",
    "SA5510_TOKENS",
    "SA5510_STATEMENTS",
    "SBasicDecoder",
    "SBASIC_TOKENS",
    "SBASIC_STATEMENTS",
    "SBASIC_FUNCTIONS",
    "DECODERS",
    "get_decoder",
    "detokenize",
]
