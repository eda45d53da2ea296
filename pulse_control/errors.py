"""
Error types for Pulse Control
"""

from typing import Optional


class PulseError(Exception):
    """Base class for every failure raised by the control layer"""


class TransportError(PulseError):
    """The audio server request or a state query failed"""

    def __init__(self, message: str, command: Optional[int] = None):
        super().__init__(message)
        self.command = command


class ProtocolError(PulseError):
    """A command payload could not be encoded or decoded"""


class DeviceNotFound(PulseError):
    def __init__(self, name: str, kind: str = "sink"):
        super().__init__(f"PulseAudio error: {kind} {name} not found")
        self.name = name
        self.kind = kind
