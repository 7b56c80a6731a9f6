"""
Sharp-ASCII Character Mapping
=============================

Maps the 8-bit character set of the Sharp MZ series ("Sharp-ASCII") to
printable text.

Sharp-ASCII Overview:
    Codes $20-$5D match 7-bit ASCII (upper-case letters, digits and
    punctuation). Lower-case letters exist but are scattered through
    $92-$BD in no alphabetical order. Everything else is graphics: block
    elements, box drawing, card suits, cursor-control symbols and a few
    European letters.

Machine Variants:
    The MZ-80K, MZ-80A and MZ-700 share the table apart from a handful of
    codes. The MZ-80A and MZ-700 replaced six MZ-80K graphics with the
    ASCII punctuation the MZ-80K lacked, and the MZ-700 changed two more.
    The active variant is an explicit argument, never global state.

Render Modes:
    UNICODE - nearest Unicode glyph for each graphic (default)
    FONT    - private-use code points for terminals running mz-ascii.ttf:
              $E000 + code, or $F000 + code for variant-specific codes
    ASCII   - 7-bit output only, graphics become the placeholder

Usage:
    from mztape.charset import CharacterMapper, MachineVariant

    mapper = CharacterMapper(variant=MachineVariant.MZ700)
    text = mapper.map_bytes(b"\\x48\\x92\\xb8\\xb8\\xb7")   # "Hello"

Copyright (c) 2026 mztape Contributors
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable


# =============================================================================
# Constants
# =============================================================================

# Rendered for any code with no glyph in the active mode
PLACEHOLDER = "."

# Sharp-ASCII matches ASCII from space to ']'
ASCII_FIRST = 0x20
ASCII_LAST = 0x5D

FONT_BASE = 0xE000          # mz-ascii.ttf, common glyphs
FONT_VARIANT_BASE = 0xF000  # mz-ascii.ttf, MZ-80A/MZ-700 specific glyphs


class MachineVariant(Enum):
    """Sharp MZ machines whose character sets differ."""
    MZ80K = "MZ-80K"
    MZ80A = "MZ-80A"
    MZ700 = "MZ-700"


class RenderMode(Enum):
    """How non-ASCII Sharp characters are rendered."""
    UNICODE = "unicode"
    FONT = "font"
    ASCII = "ascii"


# =============================================================================
# Lower-case Letters
# =============================================================================
# Sharp placed lower-case letters in the graphics area, out of order.
# =============================================================================

LOWERCASE_CODES: Dict[int, str] = {
    0xA1: "a", 0x9A: "b", 0x9F: "c", 0x9C: "d", 0x92: "e", 0xAA: "f",
    0x97: "g", 0x98: "h", 0xA6: "i", 0xAF: "j", 0xA9: "k", 0xB8: "l",
    0xB3: "m", 0xB0: "n", 0xB7: "o", 0x9E: "p", 0xA0: "q", 0x9D: "r",
    0xA4: "s", 0x96: "t", 0xA5: "u", 0xAB: "v", 0xA3: "w", 0x9B: "x",
    0xBD: "y", 0xA2: "z",
}


# =============================================================================
# Graphics Table (MZ-80K layout)
# =============================================================================
# Codes $00-$10 and $17-$1F are control codes with no glyph.
# =============================================================================

GRAPHICS: Dict[int, str] = {
    # Cursor control
    0x11: "⇣",  # cursor down
    0x12: "⇡",  # cursor up
    0x13: "⇢",  # cursor right
    0x14: "⇠",  # cursor left
    0x15: "⌂",  # home
    0x16: "⌧",  # clear screen

    0x5E: "↑",  # up arrow, exponentiation in BASIC
    0x5F: "←",

    # Eighth blocks and box drawing
    0x60: "▔", 0x61: "▁", 0x62: "▏", 0x63: "▕",
    0x64: "▂", 0x65: "▃", 0x66: "▄", 0x67: "▅",
    0x68: "▆", 0x69: "▇", 0x6A: "█", 0x6B: "▉",
    0x6C: "▊", 0x6D: "▋", 0x6E: "▌", 0x6F: "▍",
    0x70: "▎", 0x71: "─", 0x72: "│", 0x73: "┼",
    0x74: "├", 0x75: "┤", 0x76: "┬", 0x77: "┴",
    0x78: "┌", 0x79: "┐", 0x7A: "└", 0x7B: "┘",
    0x7C: "╱", 0x7D: "╲", 0x7E: "╳", 0x7F: "▒",

    # Quadrants and triangles
    0x80: "▘", 0x81: "▝", 0x82: "▖", 0x83: "▗",
    0x84: "▚", 0x85: "▞", 0x86: "▙", 0x87: "▟",
    0x88: "▛", 0x89: "▜", 0x8A: "▀", 0x8B: "▐",
    0x8C: "◢", 0x8D: "◣", 0x8E: "◤", 0x8F: "◥",

    # Rounded corners, shapes and European letters between the lower case
    0x90: "╭", 0x91: "╮", 0x93: "╯", 0x94: "╰",
    0x95: "●", 0x99: "○",
    0xA7: "ä", 0xA8: "Ö", 0xAC: "Ü", 0xAD: "ü",
    0xAE: "ß",
    0xB1: "ö", 0xB2: "Ä", 0xB4: "◆", 0xB5: "◇",
    0xB6: "□", 0xB9: "▪", 0xBA: "▫", 0xBB: "×",
    0xBC: "÷", 0xBE: "◀", 0xBF: "▶",

    # Heavy box drawing
    0xC0: "△", 0xC1: "▽", 0xC2: "▷", 0xC3: "◁",
    0xC4: "╋", 0xC5: "┃", 0xC6: "━", 0xC7: "┏",
    0xC8: "┓", 0xC9: "┗", 0xCA: "┛", 0xCB: "┣",
    0xCC: "┫", 0xCD: "┳", 0xCE: "┻", 0xCF: "◘",

    # Double box drawing and shades
    0xD0: "═", 0xD1: "║", 0xD2: "╬", 0xD3: "╔",
    0xD4: "╗", 0xD5: "╚", 0xD6: "╝", 0xD7: "╠",
    0xD8: "╣", 0xD9: "╦", 0xDA: "╩", 0xDB: "░",
    0xDC: "▓", 0xDD: "◙", 0xDE: "◯", 0xDF: "◉",

    # Card suits and pictographs
    0xE0: "♤", 0xE1: "♠", 0xE2: "♥", 0xE3: "♣",
    0xE4: "♦", 0xE5: "♡", 0xE6: "♧", 0xE7: "♢",
    0xE8: "☺", 0xE9: "☻", 0xEA: "♪", 0xEB: "♫",
    0xEC: "☼", 0xED: "↗", 0xEE: "↘", 0xEF: "↙",

    # Arrows, mathematical signs and currency
    0xF0: "↖", 0xF1: "→", 0xF2: "↓", 0xF3: "⌐",
    0xF4: "¬", 0xF5: "±", 0xF6: "°", 0xF7: "√",
    0xF8: "∞", 0xF9: "≈", 0xFA: "≠", 0xFB: "£",
    0xFC: "¥", 0xFD: "¢", 0xFE: "§", 0xFF: "π",
}

# Replacements in the later machines' character generators
_MZ80A_GLYPHS: Dict[int, str] = {
    0x80: "}", 0x8B: "^", 0x90: "_", 0x93: "`", 0x94: "~", 0xBE: "{",
}

VARIANT_GLYPHS: Dict[MachineVariant, Dict[int, str]] = {
    MachineVariant.MZ80K: {},
    MachineVariant.MZ80A: _MZ80A_GLYPHS,
    MachineVariant.MZ700: {**_MZ80A_GLYPHS, 0x6C: "|", 0x7F: "■"},
}

VARIANT_CODES: Dict[MachineVariant, FrozenSet[int]] = {
    variant: frozenset(glyphs) for variant, glyphs in VARIANT_GLYPHS.items()
}

# 7-bit stand-ins used by ASCII mode
_ASCII_FALLBACK: Dict[int, str] = {
    0x5E: "^",
}


# =============================================================================
# Mapping Functions
# =============================================================================

def map_char(
    code: int,
    variant: MachineVariant = MachineVariant.MZ80K,
    mode: RenderMode = RenderMode.UNICODE,
) -> str:
    """
    Map one Sharp-ASCII code to a display grapheme.

    Total over 0-255: codes without a glyph render as PLACEHOLDER.

    Args:
        code: Sharp-ASCII byte value
        variant: Machine whose character generator applies
        mode: Output rendering mode

    Returns:
        A single-character string
    """
    code &= 0xFF

    if ASCII_FIRST <= code <= ASCII_LAST:
        return chr(code)

    letter = LOWERCASE_CODES.get(code)
    if letter is not None:
        return letter

    if mode is RenderMode.FONT:
        if code in VARIANT_CODES[variant]:
            return chr(FONT_VARIANT_BASE + code)
        return chr(FONT_BASE + code)

    glyph = VARIANT_GLYPHS[variant].get(code) or GRAPHICS.get(code)
    if glyph is None:
        return PLACEHOLDER

    if mode is RenderMode.ASCII and not glyph.isascii():
        return _ASCII_FALLBACK.get(code, PLACEHOLDER)

    return glyph


def map_bytes(
    data: Iterable[int],
    variant: MachineVariant = MachineVariant.MZ80K,
    mode: RenderMode = RenderMode.UNICODE,
) -> str:
    """Map a run of Sharp-ASCII codes to a string."""
    return "".join(map_char(b, variant, mode) for b in data)


@dataclass(frozen=True)
class CharacterMapper:
    """
    A machine variant and render mode bundled for repeated mapping.

    Decoders receive one of these instead of consulting global state.

    Attributes:
        variant: Machine whose character generator applies
        mode: Output rendering mode
    """
    variant: MachineVariant = MachineVariant.MZ80K
    mode: RenderMode = RenderMode.UNICODE

    def __call__(self, code: int) -> str:
        return map_char(code, self.variant, self.mode)

    def map_bytes(self, data: Iterable[int]) -> str:
        return map_bytes(data, self.variant, self.mode)
