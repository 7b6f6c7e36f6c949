import pytest
from PIL import Image

from receipt_printer.domain.entities.char_set import CharSet
from receipt_printer.domain.entities.operation import (
    AlignCenter,
    BoldOff,
    BoldOn,
    InitPrinter,
    LineSpacing,
    NextLine,
    Print,
    PrintBarcode,
    PrintBitmap,
    PrintQr,
    PrintQr2,
    SetCodeSystem,
    SetDarkness,
    SetFontSize,
    UnderlineOff,
    UnderlineOneDot,
    UnderlineTwoDot,
)
from receipt_printer.domain.exception import InvalidArgument
from receipt_printer.infra.escpos_encoder import EscposCommandEncoder


@pytest.fixture
def escpos():
    return EscposCommandEncoder()


class TestFixedCommands:
    def test_known_sequences(self, escpos):
        """
        operation → expected ESC/POS bytes
        """
        cases = [
            (InitPrinter(), b"\x1b@"),
            (BoldOn(), b"\x1bE\x01"),
            (BoldOff(), b"\x1bE\x00"),
            (UnderlineOff(), b"\x1b-\x00"),
            (UnderlineOneDot(), b"\x1b-\x01"),
            (UnderlineTwoDot(), b"\x1b-\x02"),
            (AlignCenter(), b"\x1ba\x01"),
            (SetFontSize(0x11), b"\x1d!\x11"),
            (SetCodeSystem(CharSet.UTF8), b"\x1cC\xff"),
            (SetCodeSystem(CharSet.GB18030), b"\x1cC\x00"),
            (NextLine(3), b"\n\n\n"),
            (LineSpacing(30), b"\x1b3\x1e"),
            (SetDarkness(0x0102), b"\x1d(E\x04\x00\x05\x05\x01\x02"),
            (Print(b"raw"), b"raw"),
        ]
        for operation, expected in cases:
            assert escpos.encode(operation) == expected, operation

    def test_line_spacing_out_of_range_should_raise(self, escpos):
        with pytest.raises(InvalidArgument):
            escpos.encode(LineSpacing(300))


class TestRenderedCommands:
    def test_qr_uses_native_2d_command(self, escpos):
        assert b"\x1d(k" in escpos.encode(PrintQr("hello", 4, 1))

    def test_qr2_prints_both_codes(self, escpos):
        single = escpos.encode(PrintQr("hello", 4, 1))
        double = escpos.encode(PrintQr2("hello", "world", 4, 1))

        assert double.startswith(single)
        assert len(double) > len(single)

    def test_invalid_qr_size_should_raise(self, escpos):
        with pytest.raises(InvalidArgument):
            escpos.encode(PrintQr("hello", 99, 1))

    def test_barcode(self, escpos):
        output = escpos.encode(PrintBarcode("5901234123457", 2, 80, 2, 2))
        assert b"\x1dk" in output

    def test_unknown_symbology_should_raise(self, escpos):
        with pytest.raises(InvalidArgument):
            escpos.encode(PrintBarcode("123", 42, 80, 2, 2))

    def test_unknown_text_position_should_raise(self, escpos):
        with pytest.raises(InvalidArgument):
            escpos.encode(PrintBarcode("123", 8, 80, 2, 7))

    def test_bitmap_is_raster_image(self, escpos):
        image = Image.new("1", (16, 8), color=0)
        assert b"\x1dv0" in escpos.encode(PrintBitmap(image))


class TestTextCodec:
    def test_text_follows_char_set(self, escpos):
        assert escpos.encode_text("中文", CharSet.GB18030) == "中文".encode("gb18030")
        assert escpos.encode_text("中文", CharSet.UTF8) == "中文".encode("utf-8")

    def test_unencodable_text_should_raise(self, escpos):
        with pytest.raises(InvalidArgument):
            escpos.encode_text("😀", CharSet.BIG5)


class TestStyleTable:
    def test_fixed_commands_follow_escpos_style_table(self, escpos):
        from escpos.constants import TXT_STYLE

        assert escpos.encode(BoldOn()) == TXT_STYLE["bold"][True]
        assert escpos.encode(UnderlineTwoDot()) == TXT_STYLE["underline"][2]
        assert escpos.encode(AlignCenter()) == TXT_STYLE["align"]["center"]
