from dataclasses import dataclass

from receipt_printer.domain.entities.char_set import CharSet


@dataclass(frozen=True)
class PrinterState:
    """
    Configuration of one print session.
    Never mutated in place: every transition returns a new record.
    """
    char_set: CharSet = CharSet.UTF8
    bold: bool = False
    inverted: bool = False
    connected: bool = False
