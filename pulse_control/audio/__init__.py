from .volume import VolumeController
from .mute import MuteController, MuteResult, MuteStatus
from .pactl import PactlTransport
from .transport import Transport

__all__ = [
    "VolumeController",
    "MuteController",
    "MuteResult",
    "MuteStatus",
    "PactlTransport",
    "Transport",
]
