import pytest

from receipt_printer.application.dispatcher import InstructionDispatcher
from receipt_printer.application.printer_session import PrinterSession
from receipt_printer.domain.interfaces.i_command_encoder import ICommandEncoder
from receipt_printer.domain.interfaces.i_image_decoder import IImageDecoder
from receipt_printer.domain.interfaces.i_transport import ITransport


class FakeTransport(ITransport):
    def __init__(self, connect_ok=True, fail_after=None):
        self.connect_ok = connect_ok
        # number of successful sends before every send fails
        self.fail_after = fail_after
        self.sent = []
        self.connect_calls = 0
        self.closed = False

    def connect(self):
        self.connect_calls += 1
        return self.connect_ok

    def send(self, data):
        if self.fail_after is not None and len(self.sent) >= self.fail_after:
            return False, "link lost"
        self.sent.append(data)
        return True, None

    def close(self):
        self.closed = True


class RecordingEncoder(ICommandEncoder):
    def __init__(self):
        self.operations = []

    def encode(self, operation):
        self.operations.append(operation)
        return repr(operation).encode()

    def encode_text(self, text, char_set):
        return text.encode(char_set.codec)


class FakeImageDecoder(IImageDecoder):
    def decode(self, raw):
        return ("image", bytes(raw))


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def encoder():
    return RecordingEncoder()


@pytest.fixture
def session(transport, encoder):
    return PrinterSession(transport, encoder, FakeImageDecoder())


@pytest.fixture
def sessions():
    """Sessions created by the dispatcher, newest last."""
    return []


@pytest.fixture
def dispatcher(transport, encoder, sessions):
    def factory():
        s = PrinterSession(transport, encoder, FakeImageDecoder())
        sessions.append(s)
        return s

    return InstructionDispatcher(factory)
