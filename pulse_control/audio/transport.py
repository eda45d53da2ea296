"""
Contract between the controllers and whatever talks to the audio server
"""

from typing import List, Protocol

from ..models import Device, ServerInfo
from .protocol import Command


class Transport(Protocol):
    """Request/response access to an already connected audio server.

    Implementations raise TransportError on failure. Serializing concurrent
    requests over one connection is up to the implementation.
    """

    def request(self, command: Command, payload: bytes) -> bytes: ...

    def server_info(self) -> ServerInfo: ...

    def sinks(self) -> List[Device]: ...

    def sources(self) -> List[Device]: ...
