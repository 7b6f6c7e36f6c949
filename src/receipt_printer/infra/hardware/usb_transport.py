from typing import Optional, Tuple

import usb.core
from escpos.exceptions import DeviceNotFoundError
from escpos.printer import Usb

from receipt_printer.config.settings import Settings
from receipt_printer.domain.interfaces.i_transport import ITransport
from receipt_printer.utils.logger import setup_logger

logger = setup_logger(__name__)

# No such device (it may have been disconnected)
ENODEV = 19


class PrinterUnavailable(Exception):
    """Printer is not connected / got unplugged."""


class UsbEscposTransport(ITransport):
    def __init__(
        self,
        vid: int = Settings.Printer.VID,
        pid: int = Settings.Printer.PID,
        timeout: int = Settings.Printer.TIMEOUT,
    ):
        self._vid = vid
        self._pid = pid
        self._timeout = timeout
        self._p: Usb | None = None

    def _connect(self) -> None:
        """Try to connect to the printer. On failure _p stays None."""
        try:
            logger.info(
                f"🖨️  Connecting ESC/POS USB printer {hex(self._vid)}:{hex(self._pid)}"
            )
            printer = Usb(
                idVendor=self._vid,
                idProduct=self._pid,
                timeout=self._timeout,
                in_ep=Settings.Printer.IN_EP,
                out_ep=Settings.Printer.OUT_EP,
            )
            printer.open()
            self._p = printer
        except (usb.core.USBError, DeviceNotFoundError) as e:
            logger.error(f"❌ Cannot connect to printer: {e}")
            self._p = None

    def _ensure_connected(self) -> None:
        if self._p is None:
            self._connect()
        if self._p is None:
            raise PrinterUnavailable("Printer is not connected")

    def _safe_write(self, data: bytes) -> None:
        """
        Write raw bytes with one reconnect attempt.
        If the printer got unplugged:
          - reconnect once
          - if it still fails -> raise PrinterUnavailable
        """
        for attempt in (1, 2):
            self._ensure_connected()

            try:
                self._p._raw(data)
                return

            except usb.core.USBError as e:
                if e.errno == ENODEV:
                    logger.warning(
                        f"⚠ USB printer is disconnected (USBError 19), attempt {attempt}. "
                        "Trying to reconnect..."
                    )
                    # the old connection is broken
                    self._p = None

                    if attempt == 2:
                        logger.error("❌ Failed to reconnect, printer still disconnected")
                        raise PrinterUnavailable("Printer disconnected (USBError 19)")

                    continue

                logger.error(f"❌ USB error printer: {e}")
                raise PrinterUnavailable(f"Error USB printer: {e}")

            except OSError as e:
                # some platforms raise OSError errno 19 instead
                if getattr(e, "errno", None) == ENODEV:
                    logger.warning(
                        f"⚠ OSError 19: printer disconnected, attempt {attempt}. "
                        "Trying to reconnect..."
                    )
                    self._p = None

                    if attempt == 2:
                        raise PrinterUnavailable("Printer disconnected (OSError 19)")

                    continue

                logger.error(f"❌ OSError printer: {e}")
                raise PrinterUnavailable(f"Error OS printer: {e}")

        raise PrinterUnavailable("Printer unavailable (unknown)")

    # ==== ITransport ====
    def connect(self) -> bool:
        self._connect()
        return self._p is not None

    def send(self, data: bytes) -> Tuple[bool, Optional[str]]:
        try:
            self._safe_write(data)
        except PrinterUnavailable as e:
            return False, str(e)
        return True, None

    def close(self) -> None:
        if self._p is not None:
            try:
                self._p.close()
            except usb.core.USBError as e:
                logger.error(f"❌ Error closing printer: {e}")
            self._p = None
