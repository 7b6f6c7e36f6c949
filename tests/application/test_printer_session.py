import pytest

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
    UnderlineTwoDot,
)
from receipt_printer.domain.exception import (
    InvalidArgument,
    NotConnected,
    PrinterConnectionError,
    TransportSendError,
)


class TestConnect:
    def test_connect_emits_init(self, session, encoder, transport):
        session.connect()

        assert session.connected is True
        assert encoder.operations == [InitPrinter()]
        assert len(transport.sent) == 1

    def test_open_selects_utf8(self, session, encoder):
        session.open()

        assert encoder.operations == [InitPrinter(), SetCodeSystem(CharSet.UTF8)]
        assert session.state.char_set is CharSet.UTF8

    def test_failed_connect_should_raise(self, session, encoder, transport):
        transport.connect_ok = False

        with pytest.raises(PrinterConnectionError):
            session.connect()

        assert session.connected is False
        assert encoder.operations == []

    def test_connection_error_is_builtin_connection_error(self, session, transport):
        transport.connect_ok = False

        with pytest.raises(ConnectionError):
            session.connect()

    def test_emitting_before_connect_should_raise(self, session, encoder):
        with pytest.raises(NotConnected):
            session.next_line()
        with pytest.raises(NotConnected):
            session.print_text("hello")

        assert encoder.operations == []

    def test_close_releases_transport(self, session, transport):
        session.close()
        assert transport.closed is True


class TestCommands:
    @pytest.fixture(autouse=True)
    def connected(self, session, encoder):
        session.connect()
        encoder.operations.clear()

    def test_print_text_uses_current_char_set(self, session, encoder):
        session.set_character_set(CharSet.GB18030)
        session.print_text("你好")

        assert encoder.operations[-1] == Print("你好".encode("gb18030"))

    def test_print_empty_text_is_noop(self, session, encoder):
        session.print_text("")
        session.print_text(None)

        assert encoder.operations == []

    def test_println_empty_emits_single_newline(self, session, encoder):
        session.print_line("")

        assert encoder.operations == [NextLine(1)]

    def test_println_text(self, session, encoder):
        session.print_line("Hello")

        assert encoder.operations == [Print(b"Hello"), NextLine(1)]

    def test_bold_toggle(self, session, encoder):
        session.set_bold()
        session.set_bold()
        session.set_bold(True)

        assert encoder.operations == [BoldOn(), BoldOff(), BoldOn()]
        assert session.state.bold is True

    def test_underline(self, session, encoder):
        session.set_underline("Thick")
        assert encoder.operations == [UnderlineTwoDot()]

    def test_invalid_underline_emits_nothing(self, session, encoder):
        with pytest.raises(InvalidArgument):
            session.set_underline("bold")
        assert encoder.operations == []

    def test_font_size_is_clamped(self, session, encoder):
        session.set_font_size(0, 20)
        assert encoder.operations == [SetFontSize(0x0F)]

    def test_darkness_is_passed_through(self, session, encoder):
        session.set_darkness(-42)
        assert encoder.operations == [SetDarkness(-42)]

    def test_alignment(self, session, encoder):
        session.set_alignment("center")
        assert encoder.operations == [AlignCenter()]

    def test_qr_barcode_passthrough(self, session, encoder):
        session.print_qr("data", 4, 9)
        session.print_qr2("a", "b", 3, 1)
        session.print_barcode("123", 8, 162, 2, 2)

        assert encoder.operations == [
            PrintQr("data", 4, 9),
            PrintQr2("a", "b", 3, 1),
            PrintBarcode("123", 8, 162, 2, 2),
        ]

    def test_line_spacing_default(self, session, encoder):
        session.set_line_spacing()
        session.set_line_spacing(12)

        assert encoder.operations == [LineSpacing(30), LineSpacing(12)]

    def test_bitmap_is_decoded(self, session, encoder):
        session.print_bitmap(b"\x89PNG")
        assert encoder.operations == [PrintBitmap(("image", b"\x89PNG"))]

    def test_empty_bitmap_should_raise(self, session, encoder):
        with pytest.raises(InvalidArgument):
            session.print_bitmap(b"")
        assert encoder.operations == []

    def test_send_failure_should_raise(self, session, transport):
        transport.fail_after = len(transport.sent)

        with pytest.raises(TransportSendError):
            session.next_line(2)

    def test_state_unchanged_when_send_fails(self, session, transport):
        transport.fail_after = len(transport.sent)

        with pytest.raises(TransportSendError):
            session.set_bold(True)

        assert session.state.bold is False
