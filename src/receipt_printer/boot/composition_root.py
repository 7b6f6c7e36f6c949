from typing import Callable, Dict

from receipt_printer.application.dispatcher import InstructionDispatcher
from receipt_printer.application.print_batch_uc import PrintBatchUseCase
from receipt_printer.application.printer_session import PrinterSession
from receipt_printer.config.settings import Settings
from receipt_printer.domain.interfaces.i_transport import ITransport
from receipt_printer.infra.escpos_encoder import EscposCommandEncoder
from receipt_printer.infra.hardware.network_transport import NetworkEscposTransport
from receipt_printer.infra.hardware.usb_transport import UsbEscposTransport
from receipt_printer.infra.image_decoder import PillowImageDecoder
from receipt_printer.utils.logger import setup_logger

logger = setup_logger(__name__)

TRANSPORTS: Dict[str, Callable[[], ITransport]] = {
    "usb": lambda: UsbEscposTransport(vid=Settings.Printer.VID, pid=Settings.Printer.PID),
    "network": lambda: NetworkEscposTransport(
        host=Settings.Printer.HOST, port=Settings.Printer.PORT
    ),
}


def build_app(kind: str = Settings.Printer.TRANSPORT) -> PrintBatchUseCase:
    if kind not in TRANSPORTS:
        raise ValueError(f"Unknown printer transport: {kind!r}")

    new_transport = TRANSPORTS[kind]
    encoder = EscposCommandEncoder()
    image_decoder = PillowImageDecoder()

    def new_session() -> PrinterSession:
        # one transport connection per batch
        return PrinterSession(new_transport(), encoder, image_decoder)

    logger.info(f"Printer transport: {kind}")
    return PrintBatchUseCase(InstructionDispatcher(new_session))
