from abc import ABC, abstractmethod

from receipt_printer.domain.entities.char_set import CharSet
from receipt_printer.domain.entities.operation import Operation


class ICommandEncoder(ABC):
    @abstractmethod
    def encode(self, operation: Operation) -> bytes:
        """Byte sequence understood by the device for one operation"""
        pass

    @abstractmethod
    def encode_text(self, text: str, char_set: CharSet) -> bytes:
        """Raw bytes of text in the given code system"""
        pass
