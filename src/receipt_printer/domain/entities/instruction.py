from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, List, Mapping, Optional


class Severity(Enum):
    """ what the batch runner does after a failed instruction """
    RECOVERABLE = auto()
    FATAL = auto()


@dataclass(frozen=True)
class Instruction:
    method: Any
    params: Any = None

    @classmethod
    def from_payload(cls, item: Any) -> "Instruction":
        """
        Build from one payload item: {"method": str, "params": list}.
        Never raises; a malformed item fails later at dispatch.
        """
        if not isinstance(item, Mapping):
            return cls(method=None, params=None)
        return cls(method=item.get("method"), params=item.get("params"))


@dataclass(frozen=True)
class InstructionOutcome:
    index: int
    method: Any
    error: Optional[Exception] = None
    severity: Optional[Severity] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    success: bool
    outcomes: List[InstructionOutcome] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def failures(self) -> List[InstructionOutcome]:
        return [o for o in self.outcomes if not o.ok]

    def raise_for_status(self) -> None:
        if self.error is not None:
            raise self.error
