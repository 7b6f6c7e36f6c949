from typing import Any, Callable, Iterable, List, Optional, Sequence

from receipt_printer.application.printer_session import PrinterSession
from receipt_printer.application.requests import (
    AlignRequest,
    BarcodeRequest,
    BitmapRequest,
    BoldRequest,
    DarknessRequest,
    FontSizeRequest,
    LineSpacingRequest,
    NewLineRequest,
    PrintLineRequest,
    PrintRequest,
    Qr2Request,
    QrRequest,
    Request,
    UnderlineRequest,
    parse_request,
)
from receipt_printer.config.settings import Settings
from receipt_printer.domain.entities.instruction import (
    BatchResult,
    Instruction,
    InstructionOutcome,
    Severity,
)
from receipt_printer.domain.exception import InvalidArgument, UnknownMethod
from receipt_printer.utils.logger import setup_logger

logger = setup_logger(__name__)

RECOVERABLE_ERRORS = (InvalidArgument, UnknownMethod)


def execute_request(session: PrinterSession, request: Request) -> None:
    match request:
        case AlignRequest(alignment):
            session.set_alignment(alignment)
        case BarcodeRequest(data, symbology, height, width, text_position):
            session.print_barcode(data, symbology, height, width, text_position)
        case BitmapRequest(raw):
            session.print_bitmap(raw)
        case BoldRequest(value):
            session.set_bold(value)
        case DarknessRequest(level):
            session.set_darkness(level)
        case FontSizeRequest(width, height):
            session.set_font_size(width, height)
        case LineSpacingRequest(value):
            session.set_line_spacing(value)
        case NewLineRequest(count):
            session.next_line(1 if count is None else count)
        case PrintRequest(text):
            session.print_text(text)
        case PrintLineRequest(text):
            session.print_line(text)
        case QrRequest(data, module_size, error_level):
            session.print_qr(data, module_size, error_level)
        case Qr2Request(data1, data2, module_size, error_level):
            session.print_qr2(data1, data2, module_size, error_level)
        case UnderlineRequest(mode):
            session.set_underline(mode)
        case _:
            raise UnknownMethod(f"No handler for {type(request).__name__}")


class InstructionDispatcher:
    """
    Runs a batch of instructions against a fresh printer session.
    A recoverable failure skips the instruction, a fatal one aborts the batch.
    """

    def __init__(self, session_factory: Callable[[], PrinterSession]):
        self._session_factory = session_factory

    def dispatch(
        self, session: PrinterSession, name: Any, params: Optional[Sequence[Any]]
    ) -> None:
        request = parse_request(name, params)
        execute_request(session, request)

    def _run_one(
        self, session: PrinterSession, index: int, instruction: Instruction
    ) -> InstructionOutcome:
        try:
            self.dispatch(session, instruction.method, instruction.params)
        except RECOVERABLE_ERRORS as e:
            logger.warning(f"⚠ Invalid instruction #{index} {instruction.method!r}: {e}")
            return InstructionOutcome(index, instruction.method, e, Severity.RECOVERABLE)
        except Exception as e:
            logger.exception(f"❗ Instruction #{index} {instruction.method!r} failed: {e}")
            return InstructionOutcome(index, instruction.method, e, Severity.FATAL)
        return InstructionOutcome(index, instruction.method)

    def _finish(self, session: PrinterSession) -> None:
        session.set_line_spacing(Settings.Batch.TRAILING_LINE_SPACING)
        session.next_line(Settings.Batch.TRAILING_FEED_LINES)

    def run_batch(self, instructions: Iterable[Instruction]) -> BatchResult:
        session = self._session_factory()
        try:
            session.open()
        except Exception as e:
            logger.error(f"❌ Printer session could not be opened: {e}")
            session.close()
            return BatchResult(success=False, error=e)

        outcomes: List[InstructionOutcome] = []
        fatal: Optional[Exception] = None
        try:
            for index, instruction in enumerate(instructions):
                outcome = self._run_one(session, index, instruction)
                outcomes.append(outcome)
                if outcome.severity is Severity.FATAL:
                    fatal = outcome.error
                    logger.error(
                        f"🛑 Batch aborted at instruction #{index}, "
                        f"{len(outcomes)} instruction(s) attempted"
                    )
                    break

            if session.connected:
                try:
                    self._finish(session)
                except Exception as e:
                    if fatal is None:
                        fatal = e
                    logger.error(f"❌ Trailing line feed failed: {e}")
        finally:
            session.close()

        return BatchResult(success=fatal is None, outcomes=outcomes, error=fatal)
