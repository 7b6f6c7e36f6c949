"""
Pure state transitions of a print session.

Every function takes the current PrinterState (plus the request values) and
returns ``(new_state, operation)``. Nothing here touches the transport, so
the whole state machine can be tested without a printer.
"""
from dataclasses import replace
from enum import Enum
from typing import Optional, Tuple

from receipt_printer.config.settings import Settings
from receipt_printer.domain.entities.char_set import CharSet
from receipt_printer.domain.entities.operation import (
    AlignCenter,
    AlignLeft,
    AlignRight,
    BoldOff,
    BoldOn,
    InitPrinter,
    NextLine,
    Operation,
    SetCodeSystem,
    SetFontSize,
    UnderlineOff,
    UnderlineOneDot,
    UnderlineTwoDot,
)
from receipt_printer.domain.entities.printer_state import PrinterState
from receipt_printer.domain.exception import InvalidArgument

Transition = Tuple[PrinterState, Operation]


class Underline(Enum):
    THIN = "THIN"
    THICK = "THICK"
    NONE = "NONE"


class Alignment(Enum):
    LEFT = "LEFT"
    CENTER = "CENTER"
    RIGHT = "RIGHT"


_UNDERLINE_OPS = {
    Underline.THIN: UnderlineOneDot(),
    Underline.THICK: UnderlineTwoDot(),
    Underline.NONE: UnderlineOff(),
}

_ALIGNMENT_OPS = {
    Alignment.LEFT: AlignLeft(),
    Alignment.CENTER: AlignCenter(),
    Alignment.RIGHT: AlignRight(),
}


def bounded(value: int, low: int, high: int) -> int:
    if low > high:
        raise InvalidArgument(f"Invalid bounds: low={low} > high={high}")
    return low if value < low else high if value > high else value


def font_size_byte(width: int, height: int) -> int:
    low, high = Settings.Font.MIN_SIZE, Settings.Font.MAX_SIZE
    byte_width = (bounded(width, low, high) - 1) << 4
    byte_height = (bounded(height, low, high) - 1) % 16
    return byte_width | byte_height


def connected(state: PrinterState) -> Transition:
    return replace(state, connected=True), InitPrinter()


def set_char_set(state: PrinterState, value: CharSet) -> Transition:
    return replace(state, char_set=value), SetCodeSystem(value)


def set_bold(state: PrinterState, value: Optional[bool] = None) -> Transition:
    bold = (not state.bold) if value is None else value
    return replace(state, bold=bold), BoldOn() if bold else BoldOff()


def set_underline(state: PrinterState, mode: str) -> Transition:
    # case-insensitive, no trimming
    try:
        underline = Underline(mode.upper())
    except (AttributeError, ValueError):
        raise InvalidArgument(f"Invalid Underline Setting: {mode!r}") from None
    return state, _UNDERLINE_OPS[underline]


def set_alignment(state: PrinterState, value: str) -> Transition:
    try:
        alignment = Alignment(value.upper())
    except (AttributeError, ValueError):
        raise InvalidArgument(f"Invalid Alignment: {value!r}") from None
    return state, _ALIGNMENT_OPS[alignment]


def set_font_size(state: PrinterState, width: int, height: int) -> Transition:
    return state, SetFontSize(font_size_byte(width, height))


def next_line(state: PrinterState, count: int = 1) -> Transition:
    if count < 0:
        raise InvalidArgument(f"Line count cannot be negative, got {count}")
    return state, NextLine(count)
