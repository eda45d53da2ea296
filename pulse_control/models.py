"""
Shared models for Pulse Control
"""

from enum import Enum
from typing import List
from pydantic import BaseModel, Field


class DeviceKind(str, Enum):
    SINK = "sink"
    SOURCE = "source"


class ServerInfo(BaseModel):
    default_sink: str
    default_source: str


class Device(BaseModel):
    """Snapshot of a sink or source as reported by the server"""

    name: str
    cvolume: List[int] = Field(default_factory=list)
    muted: bool = False

    @property
    def first_channel(self) -> int:
        return self.cvolume[0]


class VolumeUpdate(BaseModel):
    volume: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Volume level (1.0 is unity gain)"
    )


class MuteUpdate(BaseModel):
    muted: bool
    devices: List[str] = Field(
        default_factory=list, description="Target devices, default device if empty"
    )


class VolumeState(BaseModel):
    volume: float


class MuteState(BaseModel):
    muted: bool
