class PrinterError(Exception):
    """Base printer exception"""


class PrinterConnectionError(PrinterError, ConnectionError):
    """Transport could not establish a link to the printer"""


class UnknownMethod(PrinterError):
    """Instruction name is not in the dispatch table"""


class InvalidArgument(PrinterError):
    """Wrong parameter count/type or unrecognized token"""


class NotConnected(PrinterError):
    """Command emitted before the session was connected"""


class TransportSendError(PrinterError):
    pass
