from escpos.constants import CTL_LF, GS, HW_INIT, TXT_SIZE, TXT_STYLE
from escpos.exceptions import Error as EscposError
from escpos.printer import Dummy

from receipt_printer.domain.entities.char_set import CharSet
from receipt_printer.domain.entities.operation import (
    AlignCenter,
    AlignLeft,
    AlignRight,
    BoldOff,
    BoldOn,
    InitPrinter,
    LineSpacing,
    NextLine,
    Operation,
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
from receipt_printer.domain.interfaces.i_command_encoder import ICommandEncoder

# FS C n
SET_CODE_SYSTEM = b"\x1c\x43"
# GS ( E pL pH fn m nH nL
SET_DARKNESS = GS + b"\x28\x45\x04\x00\x05\x05"

# index = symbology number sent by the caller
BARCODE_SYMBOLOGIES = (
    "UPC-A",
    "UPC-E",
    "EAN13",
    "EAN8",
    "CODE39",
    "ITF",
    "NW7",
    "CODE93",
    "CODE128",
)

# index = text position number sent by the caller
BARCODE_TEXT_POSITIONS = ("OFF", "ABOVE", "BELOW", "BOTH")

_FIXED = {
    InitPrinter: HW_INIT,
    BoldOn: TXT_STYLE["bold"][True],
    BoldOff: TXT_STYLE["bold"][False],
    UnderlineOff: TXT_STYLE["underline"][0],
    UnderlineOneDot: TXT_STYLE["underline"][1],
    UnderlineTwoDot: TXT_STYLE["underline"][2],
    AlignLeft: TXT_STYLE["align"]["left"],
    AlignCenter: TXT_STYLE["align"]["center"],
    AlignRight: TXT_STYLE["align"]["right"],
}


class EscposCommandEncoder(ICommandEncoder):
    """
    ESC/POS encoder. Fixed commands come from python-escpos constants,
    QR codes, barcodes and raster images are rendered on a Dummy printer.
    """

    def encode_text(self, text: str, char_set: CharSet) -> bytes:
        try:
            return text.encode(char_set.codec)
        except UnicodeEncodeError as e:
            raise InvalidArgument(
                f"Text cannot be encoded with {char_set.name}: {e}"
            ) from e

    def encode(self, operation: Operation) -> bytes:
        fixed = _FIXED.get(type(operation))
        if fixed is not None:
            return fixed

        try:
            return self._encode(operation)
        except (ValueError, EscposError) as e:
            raise InvalidArgument(
                f"Cannot encode {type(operation).__name__}: {e}"
            ) from e

    def _encode(self, operation: Operation) -> bytes:
        match operation:
            case SetCodeSystem(char_set):
                return SET_CODE_SYSTEM + bytes((char_set.param,))
            case Print(data):
                return data
            case NextLine(count):
                return CTL_LF * count
            case SetFontSize(value):
                return TXT_SIZE + bytes((value,))
            case SetDarkness(level):
                return SET_DARKNESS + bytes(((level >> 8) & 0xFF, level & 0xFF))
            case LineSpacing(value):
                dummy = Dummy()
                dummy.line_spacing(value)
                return dummy.output
            case PrintQr(data, module_size, error_level):
                return self._qr(data, module_size, error_level)
            case PrintQr2(data1, data2, module_size, error_level):
                # no side-by-side command in plain ESC/POS: print both codes
                return self._qr(data1, module_size, error_level) + self._qr(
                    data2, module_size, error_level
                )
            case PrintBarcode(data, symbology, height, width, text_position):
                return self._barcode(data, symbology, height, width, text_position)
            case PrintBitmap(image):
                dummy = Dummy()
                dummy.image(image)
                return dummy.output
        raise InvalidArgument(f"Unsupported operation: {operation!r}")

    def _qr(self, data: str, module_size: int, error_level: int) -> bytes:
        dummy = Dummy()
        dummy.qr(data, ec=error_level, size=module_size, native=True)
        return dummy.output

    def _barcode(
        self, data: str, symbology: int, height: int, width: int, text_position: int
    ) -> bytes:
        if not 0 <= symbology < len(BARCODE_SYMBOLOGIES):
            raise InvalidArgument(f"Unknown barcode symbology: {symbology}")
        if not 0 <= text_position < len(BARCODE_TEXT_POSITIONS):
            raise InvalidArgument(f"Unknown barcode text position: {text_position}")

        dummy = Dummy()
        dummy.barcode(
            data,
            BARCODE_SYMBOLOGIES[symbology],
            height=height,
            width=width,
            pos=BARCODE_TEXT_POSITIONS[text_position],
            align_ct=False,
            function_type="B",
            check=False,
        )
        return dummy.output
