from typing import Optional, Tuple

from escpos.exceptions import DeviceNotFoundError
from escpos.printer import Network

from receipt_printer.config.settings import Settings
from receipt_printer.domain.interfaces.i_transport import ITransport
from receipt_printer.utils.logger import setup_logger

logger = setup_logger(__name__)


class NetworkEscposTransport(ITransport):
    """Raw TCP (port 9100) printer link through python-escpos Network."""

    def __init__(
        self,
        host: str = Settings.Printer.HOST,
        port: int = Settings.Printer.PORT,
        timeout: int = Settings.Printer.TIMEOUT,
    ):
        self._host = host
        self._port = port
        self._timeout = timeout
        self._p: Network | None = None

    def connect(self) -> bool:
        try:
            logger.info(f"🖨️  Connecting ESC/POS network printer {self._host}:{self._port}")
            printer = Network(self._host, port=self._port, timeout=self._timeout)
            printer.open()
            self._p = printer
        except (DeviceNotFoundError, OSError) as e:
            logger.error(f"❌ Cannot connect to printer: {e}")
            self._p = None
        return self._p is not None

    def send(self, data: bytes) -> Tuple[bool, Optional[str]]:
        if self._p is None:
            return False, "Printer is not connected"
        try:
            self._p._raw(data)
        except OSError as e:
            logger.error(f"❌ Network printer error: {e}")
            return False, str(e)
        return True, None

    def close(self) -> None:
        if self._p is not None:
            try:
                self._p.close()
            except OSError as e:
                logger.error(f"❌ Error closing printer: {e}")
            self._p = None
