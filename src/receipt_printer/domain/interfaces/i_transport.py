from abc import ABC, abstractmethod
from typing import Optional, Tuple


class ITransport(ABC):
    @abstractmethod
    def connect(self) -> bool:
        pass

    @abstractmethod
    def send(self, data: bytes) -> Tuple[bool, Optional[str]]:
        """Returns (success, error message)"""
        pass

    @abstractmethod
    def close(self) -> None:
        pass
