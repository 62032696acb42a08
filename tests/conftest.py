import pytest

from libpushover import runtime
from libpushover.context import Context
from libpushover.message import Message
from libpushover.transport.base import Transport, TransportResult


class RecordingTransport(Transport):
    """Test double that records every POST and returns a canned result."""

    def __init__(self, result: TransportResult = None):
        self.result = result or TransportResult(ok=True, status_code=200)
        self.calls = []

    @property
    def transport_type(self) -> str:
        return "recording"

    def post(self, uri: str, body: bytes) -> TransportResult:
        self.calls.append((uri, body))
        return self.result


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def ctx():
    return Context.create("tok123")


@pytest.fixture
def msg():
    m = Message.create()
    m.set_destination("usr456")
    m.set_body("Build failed")
    return m


@pytest.fixture(autouse=True)
def reset_shared_client():
    yield
    runtime.shutdown_transport()
