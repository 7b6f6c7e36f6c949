from dataclasses import dataclass
from typing import Any, Union

from receipt_printer.domain.entities.char_set import CharSet


@dataclass(frozen=True)
class InitPrinter:
    pass


@dataclass(frozen=True)
class SetCodeSystem:
    char_set: CharSet


@dataclass(frozen=True)
class Print:
    data: bytes


@dataclass(frozen=True)
class NextLine:
    count: int = 1


@dataclass(frozen=True)
class BoldOn:
    pass


@dataclass(frozen=True)
class BoldOff:
    pass


@dataclass(frozen=True)
class UnderlineOff:
    pass


@dataclass(frozen=True)
class UnderlineOneDot:
    pass


@dataclass(frozen=True)
class UnderlineTwoDot:
    pass


@dataclass(frozen=True)
class SetFontSize:
    value: int  # (width-1) << 4 | (height-1)


@dataclass(frozen=True)
class SetDarkness:
    level: int


@dataclass(frozen=True)
class AlignLeft:
    pass


@dataclass(frozen=True)
class AlignCenter:
    pass


@dataclass(frozen=True)
class AlignRight:
    pass


@dataclass(frozen=True)
class PrintQr:
    data: str
    module_size: int
    error_level: int


@dataclass(frozen=True)
class PrintQr2:
    data1: str
    data2: str
    module_size: int
    error_level: int


@dataclass(frozen=True)
class PrintBarcode:
    data: str
    symbology: int
    height: int
    width: int
    text_position: int


@dataclass(frozen=True)
class LineSpacing:
    value: int = 30


@dataclass(frozen=True)
class PrintBitmap:
    # decoded image, opaque to the domain
    image: Any


Operation = Union[
    InitPrinter,
    SetCodeSystem,
    Print,
    NextLine,
    BoldOn,
    BoldOff,
    UnderlineOff,
    UnderlineOneDot,
    UnderlineTwoDot,
    SetFontSize,
    SetDarkness,
    AlignLeft,
    AlignCenter,
    AlignRight,
    PrintQr,
    PrintQr2,
    PrintBarcode,
    LineSpacing,
    PrintBitmap,
]
