from typing import Optional

from receipt_printer.config.settings import Settings
from receipt_printer.domain import transitions
from receipt_printer.domain.entities.char_set import CharSet
from receipt_printer.domain.entities.operation import (
    LineSpacing,
    Operation,
    Print,
    PrintBarcode,
    PrintBitmap,
    PrintQr,
    PrintQr2,
    SetDarkness,
)
from receipt_printer.domain.entities.printer_state import PrinterState
from receipt_printer.domain.exception import (
    InvalidArgument,
    NotConnected,
    PrinterConnectionError,
    TransportSendError,
)
from receipt_printer.domain.interfaces.i_command_encoder import ICommandEncoder
from receipt_printer.domain.interfaces.i_image_decoder import IImageDecoder
from receipt_printer.domain.interfaces.i_transport import ITransport
from receipt_printer.utils.logger import setup_logger

logger = setup_logger(__name__)


class PrinterSession:
    """
    One print session: owns the printer state and is the only place that
    emits operations, so every emitted command sees consistent prior state.
    """

    def __init__(
        self,
        transport: ITransport,
        encoder: ICommandEncoder,
        image_decoder: IImageDecoder,
    ):
        self._transport = transport
        self._encoder = encoder
        self._image_decoder = image_decoder
        self.state = PrinterState()

    @property
    def connected(self) -> bool:
        return self.state.connected

    # ==== Lifecycle ====
    def connect(self) -> None:
        logger.info("🖨️  Connecting to printer")
        if not self._transport.connect():
            logger.error("❌ Could not connect to printer")
            raise PrinterConnectionError("Could not connect to printer")

        state, operation = transitions.connected(self.state)
        self.state = state
        self._emit(operation)

    def open(self) -> None:
        """Connect and select the default code system."""
        self.connect()
        self.set_character_set(CharSet.UTF8)

    def close(self) -> None:
        self._transport.close()

    # ==== State transitions ====
    def set_character_set(self, value: CharSet) -> None:
        self._apply(transitions.set_char_set(self.state, value))

    def set_bold(self, value: Optional[bool] = None) -> None:
        self._apply(transitions.set_bold(self.state, value))

    def set_underline(self, mode: str) -> None:
        self._apply(transitions.set_underline(self.state, mode))

    def set_alignment(self, value: str) -> None:
        self._apply(transitions.set_alignment(self.state, value))

    def set_font_size(self, width: int, height: int) -> None:
        self._apply(transitions.set_font_size(self.state, width, height))

    def next_line(self, count: int = 1) -> None:
        self._apply(transitions.next_line(self.state, count))

    # ==== Passthrough commands ====
    def print_text(self, text: Optional[str] = None) -> None:
        if not text:
            return
        self._require_connected()
        data = self._encoder.encode_text(text, self.state.char_set)
        self._emit(Print(data))

    def print_line(self, text: Optional[str] = None) -> None:
        if text:
            self.print_text(text)
        self.next_line(1)

    def set_darkness(self, level: int) -> None:
        self._emit(SetDarkness(level))

    def print_qr(self, data: str, module_size: int, error_level: int) -> None:
        self._emit(PrintQr(data, module_size, error_level))

    def print_qr2(
        self, data1: str, data2: str, module_size: int, error_level: int
    ) -> None:
        self._emit(PrintQr2(data1, data2, module_size, error_level))

    def print_barcode(
        self, data: str, symbology: int, height: int, width: int, text_position: int
    ) -> None:
        self._emit(PrintBarcode(data, symbology, height, width, text_position))

    def set_line_spacing(self, value: Optional[int] = None) -> None:
        if value is None:
            value = Settings.Font.DEFAULT_LINE_SPACING
        self._emit(LineSpacing(value))

    def print_bitmap(self, raw: bytes) -> None:
        self._require_connected()
        if not raw:
            raise InvalidArgument("Bitmap data is empty")
        image = self._image_decoder.decode(raw)
        self._emit(PrintBitmap(image))

    # ==== Emission ====
    def _require_connected(self) -> None:
        if not self.state.connected:
            raise NotConnected("Printer session is not connected")

    def _apply(self, transition: transitions.Transition) -> None:
        state, operation = transition
        self._emit(operation)
        self.state = state

    def _emit(self, operation: Operation) -> None:
        self._require_connected()
        data = self._encoder.encode(operation)
        ok, error = self._transport.send(data)
        if not ok:
            logger.error(f"❌ Failed to send {type(operation).__name__}: {error}")
            raise TransportSendError(
                f"Failed to send {type(operation).__name__}: {error}"
            )
