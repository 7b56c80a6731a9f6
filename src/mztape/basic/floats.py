"""
S-BASIC Packed Float Decoder
============================

S-BASIC stores numeric constants as 5-byte binary floats:

    Byte 0:    Exponent, biased by $80 ($00 means the value is zero)
    Byte 1-4:  Mantissa, most significant bit first. The top bit of
               byte 1 is the sign; it stands in for the always-set
               leading mantissa bit worth 0.5.

The mantissa value is 0.5 plus 2^-k for every set bit k = 2..32 after
the sign bit.

Sign handling follows the listings the MZ-700 tools produce: a negative
mantissa negates the exponent rather than the value. This has not been
confirmed against tapes holding negative constants, so it is kept as is.
"""

from dataclasses import dataclass
from typing import Optional

FLOAT_SIZE = 5
EXPONENT_BIAS = 0x80

# Significant digits shown for non-integral values
DISPLAY_DIGITS = 8


@dataclass(frozen=True)
class DecodedFloat:
    """
    Result of decoding one packed float.

    Attributes:
        text: Listing text for the number
        value: Decoded value, or None if the field was truncated
        size: Bytes consumed from the buffer
    """
    text: str
    value: Optional[float]
    size: int = FLOAT_SIZE


def format_float(value: float) -> str:
    """
    Format a decoded value for a listing.

    Values print with up to DISPLAY_DIGITS significant digits and no
    trailing zeros, so integral values have no fractional part. Larger
    magnitudes switch to exponent form.
    """
    return f"{value:.{DISPLAY_DIGITS}g}"


def decode_float(data: bytes, offset: int = 0) -> DecodedFloat:
    """
    Decode the 5-byte packed float starting at `offset`.

    Args:
        data: Buffer holding the float
        offset: Position of the exponent byte

    Returns:
        DecodedFloat; a truncated field yields text "?" and consumes
        whatever bytes remain.
    """
    available = len(data) - offset
    if available < FLOAT_SIZE:
        return DecodedFloat(text="?", value=None, size=max(available, 0))

    exponent_byte = data[offset]
    if exponent_byte == 0x00:
        return DecodedFloat(text="0", value=0.0)

    exponent = exponent_byte - EXPONENT_BIAS
    negative = bool(data[offset + 1] & 0x80)

    # The 31 bits after the sign are worth 2^-2 .. 2^-32
    fraction_bits = (
        ((data[offset + 1] & 0x7F) << 24)
        | (data[offset + 2] << 16)
        | (data[offset + 3] << 8)
        | data[offset + 4]
    )
    value = 0.5 + fraction_bits / 2**32

    if negative:
        value *= 2.0 ** -exponent
    else:
        value *= 2.0 ** exponent

    return DecodedFloat(text=format_float(value), value=value)
