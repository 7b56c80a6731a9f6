"""
Dialect Selection
=================

Maps a BASIC dialect to its decoder, so callers holding a TapeHeader can
list a program without knowing which decoder class applies.

Usage:
    from mztape.basic import detokenize

    text = detokenize(tape.body, tape.dialect)
    if text is None:
        print("not a BASIC program this viewer can list")
"""

from typing import Dict, Optional, Type

from mztape.basic.decoder import BasicDecoder
from mztape.basic.sa5510 import SA5510Decoder
from mztape.basic.sbasic import SBasicDecoder
from mztape.basic.sp5025 import SP5025Decoder
from mztape.charset import CharacterMapper, RenderMode
from mztape.mzf.records import Dialect


DECODERS: Dict[Dialect, Type[BasicDecoder]] = {
    Dialect.SP5025: SP5025Decoder,
    Dialect.SA5510: SA5510Decoder,
    Dialect.SBASIC: SBasicDecoder,
}


def get_decoder(
    dialect: Dialect,
    mode: RenderMode = RenderMode.UNICODE,
) -> Optional[BasicDecoder]:
    """
    Create the decoder for a dialect.

    The decoder's character mapper uses the dialect's own machine variant.

    Args:
        dialect: BASIC dialect
        mode: Render mode for literals

    Returns:
        A decoder, or None for Dialect.NONE
    """
    decoder_class = DECODERS.get(dialect)
    if decoder_class is None:
        return None
    return decoder_class(CharacterMapper(variant=dialect.machine_variant, mode=mode))


def detokenize(
    body: bytes,
    dialect: Dialect,
    mode: RenderMode = RenderMode.UNICODE,
) -> Optional[str]:
    """Detokenize a program body, or return None if the dialect has no decoder."""
    decoder = get_decoder(dialect, mode)
    if decoder is None:
        return None
    return decoder.decode_to_text(body)
