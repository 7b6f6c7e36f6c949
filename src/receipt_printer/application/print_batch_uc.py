from dataclasses import dataclass, field
from typing import Any, List, Optional

from receipt_printer.application.dispatcher import InstructionDispatcher
from receipt_printer.config.settings import Settings
from receipt_printer.domain.entities.instruction import Instruction, InstructionOutcome
from receipt_printer.utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass
class PrintResponse:
    success: bool
    message: str
    outcomes: List[InstructionOutcome] = field(default_factory=list)

    @property
    def failures(self) -> List[InstructionOutcome]:
        return [o for o in self.outcomes if not o.ok]


class PrintBatchUseCase:
    def __init__(self, dispatcher: InstructionDispatcher):
        self.dispatcher = dispatcher

    def execute(self, payload: Optional[List[Any]]) -> PrintResponse:
        """
        payload: list of {"method": str, "params": list}
        returns: PrintResponse -> success is False only when nothing could be
        printed or the printer failed mid-batch. Invalid instructions are
        skipped and reported in `outcomes`.
        """
        if payload is None:
            logger.warning("⚠ Empty print payload")
            return PrintResponse(False, Settings.Batch.EMPTY_MESSAGE)

        instructions = [Instruction.from_payload(item) for item in payload]
        logger.info(f"🖨️  Printing batch of {len(instructions)} instruction(s)")

        result = self.dispatcher.run_batch(instructions)

        if result.failures:
            skipped = [o.index for o in result.failures]
            logger.warning(f"⚠ Failed instruction(s): {skipped}")

        if not result.success:
            message = f"{Settings.Batch.ERROR_MESSAGE}: {result.error}"
            logger.error(f"❌ Failed to print. Please check the printer! {result.error}")
            return PrintResponse(False, message, result.outcomes)

        return PrintResponse(True, Settings.Batch.SUCCESS_MESSAGE, result.outcomes)
