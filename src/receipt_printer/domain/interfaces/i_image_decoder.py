from abc import ABC, abstractmethod
from typing import Any


class IImageDecoder(ABC):
    @abstractmethod
    def decode(self, raw: bytes) -> Any:
        """Decode raw image bytes into a device-ready image"""
        pass
