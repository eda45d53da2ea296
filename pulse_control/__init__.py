"""
Pulse Control - volume and mute control for a PulseAudio server
"""

from .audio import MuteController, MuteResult, PactlTransport, VolumeController
from .errors import DeviceNotFound, PulseError, TransportError
from .models import Device, ServerInfo

__all__ = [
    "VolumeController",
    "MuteController",
    "MuteResult",
    "PactlTransport",
    "DeviceNotFound",
    "PulseError",
    "TransportError",
    "Device",
    "ServerInfo",
]
