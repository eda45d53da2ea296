import pytest

from pulse_control.errors import TransportError
from pulse_control.models import Device, ServerInfo


class FakeTransport:
    """Records requests and serves canned server state"""

    def __init__(self, sinks=None, sources=None, default_sink="s1", default_source="mic"):
        self.info = ServerInfo(default_sink=default_sink, default_source=default_source)
        self.sink_list = sinks if sinks is not None else []
        self.source_list = sources if sources is not None else []
        self.requests = []
        self.info_calls = 0
        self.info_error = None
        self.sinks_error = None
        # name -> error raised when a request targets it
        self.request_errors = {}

    def server_info(self):
        self.info_calls += 1
        if self.info_error is not None:
            raise self.info_error
        return self.info

    def sinks(self):
        if self.sinks_error is not None:
            raise self.sinks_error
        return list(self.sink_list)

    def sources(self):
        return list(self.source_list)

    def request(self, command, payload):
        self.requests.append((command, payload))
        for name, error in self.request_errors.items():
            if b"t" + name.encode() + b"\0" in payload:
                raise error
        return b""


@pytest.fixture
def transport():
    return FakeTransport(
        sinks=[
            Device(name="s0", cvolume=[65535, 65535], muted=True),
            Device(name="s1", cvolume=[32768, 30000], muted=False),
        ],
        sources=[Device(name="mic", cvolume=[65535], muted=False)],
    )


@pytest.fixture
def transport_error():
    return TransportError("connection reset")
