"""
Unit tests for the BASIC detokenizers.

Tests cover:
- Line structure and terminators for each dialect
- String literals and remarks
- Token tables, lead bytes and unknown codes
- S-BASIC inline operands
- Truncated programs
"""

import pytest

from mztape.basic import (
    BasicDecoder,
    DecoderState,
    ListingLine,
    SA5510Decoder,
    SBasicDecoder,
    SP5025Decoder,
    detokenize,
    get_decoder,
)
from mztape.basic.sa5510 import SA5510_STATEMENTS, SA5510_TOKENS
from mztape.basic.sbasic import SBASIC_FUNCTIONS, SBASIC_STATEMENTS, SBASIC_TOKENS
from mztape.basic.sp5025 import SP5025_TOKENS
from mztape.charset import CharacterMapper, MachineVariant, RenderMode, PLACEHOLDER
from mztape.mzf import Dialect


def line(number: int, *payload: int, terminator: int = 0x0D) -> bytes:
    """Build one tokenized line: link, line number, payload, terminator."""
    return bytes([0x00, 0x00, number & 0xFF, number >> 8, *payload, terminator])


# =============================================================================
# SP-5025
# =============================================================================

class TestSP5025:
    """MZ-80K SP-5025 BASIC."""

    def setup_method(self):
        self.decoder = SP5025Decoder()

    def test_print_line(self):
        body = bytes([0x34, 0x12, 0x0A, 0x00, 0x85, 0x20, 0x0D])
        assert self.decoder.decode_to_text(body) == " 10 PRINT \n"
        assert self.decoder.state is DecoderState.LINE_NUMBER

    def test_program(self, sp5025_program):
        assert self.decoder.decode_to_text(sp5025_program) == (
            ' 10 PRINT "Hi"\n'
            " 20 GOTO 10\n"
        )

    def test_line_offsets(self, sp5025_program):
        lines = self.decoder.decode(sp5025_program)
        assert [l.number for l in lines] == [10, 20]
        assert [l.offset for l in lines] == [0, 11]

    def test_listing_line_text(self):
        assert str(ListingLine(number=10, text="END")) == " 10 END"
        assert str(ListingLine(number=0, text="")) == " 0 "

    def test_tokens_inside_string_are_characters(self):
        body = line(10, 0x85, 0x22, 0x48, 0x92, 0x85, 0x22)
        assert self.decoder.decode_to_text(body) == ' 10 PRINT"He▞"\n'

    def test_remark_until_colon(self):
        body = line(10, 0x80, 0x41, 0x85, 0x3A, 0x85)
        assert self.decoder.decode_to_text(body) == " 10 REMA▞:PRINT\n"

    def test_terminator_in_line_number(self):
        body = bytes([0x0D, 0x0D, 0x0D, 0x00, 0x8F, 0x0D])
        assert self.decoder.decode_to_text(body) == " 13 END\n"

    def test_open_string_closed_by_line_end(self):
        body = line(10, 0x85, 0x22, 0x41) + line(20, 0x8F)
        assert self.decoder.decode_to_text(body) == ' 10 PRINT"A\n 20 END\n'

    def test_open_remark_closed_by_line_end(self):
        body = line(10, 0x80, 0x41) + line(20, 0x8F)
        assert self.decoder.decode_to_text(body) == " 10 REMA\n 20 END\n"

    def test_exponent_glyph(self):
        body = line(10, 0x41, 0xCF, 0x32)
        assert self.decoder.decode_to_text(body) == " 10 A↑2\n"

    def test_exponent_glyph_in_font_mode(self):
        decoder = SP5025Decoder(CharacterMapper(MachineVariant.MZ80K, RenderMode.FONT))
        body = line(10, 0xCF)
        assert decoder.decode_to_text(body) == f" 10 {chr(0xE05E)}\n"

    def test_unknown_byte_is_one_placeholder(self):
        body = line(1, 0x01, 0x41)
        assert self.decoder.decode_to_text(body) == f" 1 {PLACEHOLDER}A\n"

    def test_unterminated_final_line(self):
        body = bytes([0x00, 0x00, 0x05, 0x00, 0x8F])
        lines = self.decoder.decode(body)
        assert len(lines) == 1
        assert not lines[0].terminated
        assert self.decoder.decode_to_text(body) == " 5 END"

    def test_end_marker_is_not_a_line(self, sp5025_program):
        assert len(self.decoder.decode(sp5025_program)) == 2

    def test_empty_body(self):
        assert self.decoder.decode(b"") == []

    @pytest.mark.parametrize("code,keyword", sorted(SP5025_TOKENS.items()))
    def test_every_token(self, code, keyword):
        expected = self.decoder.render(keyword)
        assert self.decoder.decode_to_text(line(10, code)) == f" 10 {expected}\n"


# =============================================================================
# SA-5510
# =============================================================================

class TestSA5510:
    """MZ-80A SA-5510 BASIC."""

    def setup_method(self):
        self.decoder = SA5510Decoder()

    def test_default_variant(self):
        assert self.decoder.mapper.variant is MachineVariant.MZ80A

    def test_print_statement(self):
        body = line(10, 0x80, 0x88, 0x20, 0x22, 0x48, 0x49, 0x22)
        assert self.decoder.decode_to_text(body) == ' 10 PRINT "HI"\n'

    def test_rem(self):
        body = line(10, 0x80, 0x80, 0x20, 0x80, 0x88)
        assert self.decoder.decode_to_text(body) == " 10 REM }▛\n"

    def test_assignment_operator(self):
        body = line(10, 0x41, 0x89, 0x31)
        assert self.decoder.decode_to_text(body) == " 10 A=1\n"

    def test_function(self):
        body = line(10, 0xA0, 0x41, 0x24, 0x2C, 0x32, 0x29)
        assert self.decoder.decode_to_text(body) == " 10 LEFT$(A$,2)\n"

    def test_chr_function(self):
        body = line(10, 0xA4, 0x36, 0x35, 0x29)
        assert self.decoder.decode_to_text(body) == " 10 CHR$(65)\n"

    def test_unknown_statement(self):
        body = line(10, 0x80, 0xFF, 0x41)
        assert self.decoder.decode_to_text(body) == " 10 UNKNOWN 80 TOKENA\n"

    def test_truncated_lead(self):
        body = bytes([0x00, 0x00, 0x01, 0x00, 0x80])
        assert self.decoder.decode_to_text(body) == " 1 ?"

    @pytest.mark.parametrize("code,keyword", sorted(SA5510_STATEMENTS.items()))
    def test_every_statement(self, code, keyword):
        assert self.decoder.decode_to_text(line(10, 0x80, code)) == f" 10 {keyword}\n"

    @pytest.mark.parametrize("code,keyword", sorted(SA5510_TOKENS.items()))
    def test_every_token(self, code, keyword):
        expected = self.decoder.render(keyword)
        assert self.decoder.decode_to_text(line(10, code)) == f" 10 {expected}\n"


# =============================================================================
# S-BASIC
# =============================================================================

class TestSBasic:
    """MZ-700 S-BASIC."""

    def setup_method(self):
        self.decoder = SBasicDecoder()

    def decode(self, number: int, *payload: int) -> str:
        return self.decoder.decode_to_text(line(number, *payload, terminator=0x00))

    def test_default_variant(self):
        assert self.decoder.mapper.variant is MachineVariant.MZ700

    def test_print_string(self):
        assert self.decode(10, 0x8F, 0x20, 0x22, 0x48, 0x22) == ' 10 PRINT "H"\n'

    def test_carriage_return_is_literal(self):
        assert self.decode(10, 0x0D) == f" 10 {PLACEHOLDER}\n"

    def test_goto_line_reference(self):
        assert self.decode(20, 0x80, 0x0B, 0x64, 0x00) == " 20 GOTO100\n"

    @pytest.mark.parametrize("lo,hi,text", [
        (0x34, 0x12, "$1234"),
        (0xFF, 0x00, "$FF"),
        (0x05, 0x00, "$5"),
        (0x00, 0x01, "$0100"),
    ])
    def test_hex_constant(self, lo, hi, text):
        assert self.decode(10, 0x11, lo, hi) == f" 10 {text}\n"

    def test_string_variable(self):
        assert self.decode(10, 0x03, 0x02, 0x41, 0x42) == " 10 AB$\n"

    def test_numeric_variable(self):
        assert self.decode(10, 0x05, 0x01, 0x58, 0x81, 0x00, 0x00, 0x00, 0x00) == " 10 X1\n"

    def test_float_constant(self):
        assert self.decode(10, 0x15, 0x84, 0x20, 0x00, 0x00, 0x00) == " 10 10\n"

    def test_zero_float_bytes_are_not_terminators(self):
        body = line(10, 0x15, 0x00, 0x00, 0x00, 0x00, 0x00, 0x2B, 0x31, terminator=0x00)
        assert self.decoder.decode_to_text(body) == " 10 0+1\n"

    def test_statement_lead(self):
        assert self.decode(10, 0xFE, 0x83) == " 10 COLOR\n"

    def test_function_lead(self):
        assert self.decode(10, 0xFF, 0x82, 0x28, 0x31, 0x29) == " 10 SIN(1)\n"

    def test_unknown_extended_tokens(self):
        assert self.decode(10, 0xFE, 0x00, 0x41) == " 10 UNKNOWN FE TOKENA\n"
        assert self.decode(10, 0xFF, 0x01, 0x41) == " 10 UNKNOWN FF TOKENA\n"

    def test_truncated_lead(self):
        body = bytes([0x00, 0x00, 0x0A, 0x00, 0xFF])
        assert self.decoder.decode_to_text(body) == " 10 ?"

    @pytest.mark.parametrize("payload,text", [
        ([0x03], "?"),
        ([0x03, 0x02, 0x41], "A?"),
        ([0x05, 0x02, 0x41], "A?"),
        ([0x05, 0x01, 0x41, 0x81, 0x00], "A?"),
        ([0x15, 0x84, 0x20], "?"),
        ([0x11, 0x34], "?"),
        ([0x0B], "?"),
    ])
    def test_truncated_operand(self, payload, text):
        body = bytes([0x00, 0x00, 0x0A, 0x00, *payload])
        lines = self.decoder.decode(body)
        assert len(lines) == 1
        assert not lines[0].terminated
        assert lines[0].text == text

    def test_variable_name_ending_in_question_mark(self):
        assert self.decode(10, 0x03, 0x02, 0x41, 0x3F) == " 10 A?$\n"

    def test_pi_and_exponent(self):
        assert self.decode(10, 0xD2, 0xFD, 0x32) == " 10 π↑2\n"

    def test_rem(self):
        assert self.decode(10, 0x97, 0x20, 0x80, 0x3A, 0x98) == " 10 REM }:END\n"

    def test_two_lines(self):
        body = line(10, 0x98, terminator=0x00) + line(20, 0x98, terminator=0x00) + b"\x00\x00"
        assert self.decoder.decode_to_text(body) == " 10 END\n 20 END\n"

    @pytest.mark.parametrize("code,keyword", sorted(SBASIC_TOKENS.items()))
    def test_every_token(self, code, keyword):
        expected = self.decoder.render(keyword)
        assert self.decode(10, code) == f" 10 {expected}\n"

    @pytest.mark.parametrize("code,keyword", sorted(SBASIC_STATEMENTS.items()))
    def test_every_statement(self, code, keyword):
        assert self.decode(10, 0xFE, code) == f" 10 {keyword}\n"

    @pytest.mark.parametrize("code,keyword", sorted(SBASIC_FUNCTIONS.items()))
    def test_every_function(self, code, keyword):
        assert self.decode(10, 0xFF, code) == f" 10 {keyword}\n"


# =============================================================================
# Dialect Selection
# =============================================================================

class TestDetokenizer:
    """Picking a decoder for a dialect."""

    def test_decoder_classes(self):
        assert isinstance(get_decoder(Dialect.SP5025), SP5025Decoder)
        assert isinstance(get_decoder(Dialect.SA5510), SA5510Decoder)
        assert isinstance(get_decoder(Dialect.SBASIC), SBasicDecoder)

    def test_no_decoder_for_none(self):
        assert get_decoder(Dialect.NONE) is None
        assert detokenize(b"\x00\x00\x0a\x00\x85\x0d", Dialect.NONE) is None

    def test_decoder_mapper_follows_dialect(self):
        decoder = get_decoder(Dialect.SA5510, RenderMode.ASCII)
        assert decoder.mapper == CharacterMapper(MachineVariant.MZ80A, RenderMode.ASCII)

    def test_detokenize(self, sp5025_program):
        assert detokenize(sp5025_program, Dialect.SP5025).startswith(' 10 PRINT "Hi"\n')

    def test_base_decoder_lists_literals(self):
        assert BasicDecoder().decode_to_text(line(10, 0x41, 0x42)) == " 10 AB\n"
