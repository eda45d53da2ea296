"""
Volume control for the default or a named sink
"""

from typing import Optional

from loguru import logger

from ..models import DeviceKind
from .protocol import Command, VOLUME_NORM, raw_to_volume, set_volume_payload, volume_to_raw
from .resolver import require_device
from .transport import Transport


class VolumeController:
    """Reads and writes sink volume as a float, 1.0 being unity gain.

    Values above 1.0 boost the signal. Nothing is cached: every call asks the
    server for its current default sink.
    """

    def __init__(
        self,
        transport: Transport,
        volume_norm: int = VOLUME_NORM,
        boost_limit: Optional[float] = None,
    ):
        self.transport = transport
        self.volume_norm = volume_norm
        # Only warned about, the server gets the value regardless
        self.boost_limit = boost_limit

    def get_volume(self) -> float:
        """Volume of the default sink's first channel"""
        info = self.transport.server_info()
        sinks = self.transport.sinks()
        sink = require_device(sinks, info.default_sink, DeviceKind.SINK)
        return raw_to_volume(sink.first_channel, self.volume_norm)

    volume = get_volume

    def set_volume(self, volume: float) -> None:
        """Set the default sink's volume"""
        info = self.transport.server_info()
        self.set_sink_volume(info.default_sink, volume)

    def set_sink_volume(self, sink_name: str, volume: float) -> None:
        if self.boost_limit is not None and volume > self.boost_limit:
            logger.warning(
                f"Volume {volume:.3f} for sink {sink_name} exceeds boost limit {self.boost_limit}"
            )
        raw = volume_to_raw(volume, self.volume_norm)
        logger.debug(f"Setting volume of sink {sink_name} to {raw} ({volume:.3f})")
        self.transport.request(
            Command.SET_SINK_VOLUME, set_volume_payload(sink_name, [raw])
        )
        logger.info(f"Set volume to {volume:.3f} for sink {sink_name}")
