"""
Mute control for sinks and sources
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from loguru import logger

from ..errors import DeviceNotFound, PulseError
from ..models import DeviceKind
from .protocol import Command, set_mute_payload
from .resolver import require_device, resolve_targets
from .transport import Transport


class MuteStatus(str, Enum):
    OK = "ok"
    DEVICE_NOT_FOUND = "device_not_found"
    TRANSPORT_ERROR = "transport_error"


@dataclass
class MuteResult:
    """Outcome of a mute query or toggle.

    ``muted`` is only meaningful when ``ok`` is true. On failure it holds the
    value older callers relied on (see MuteController.mute and toggle_mute).
    """

    muted: bool
    status: MuteStatus = MuteStatus.OK
    error: Optional[PulseError] = None

    @property
    def ok(self) -> bool:
        return self.status is MuteStatus.OK

    def raise_for_status(self) -> "MuteResult":
        if self.error is not None:
            raise self.error
        return self

    @classmethod
    def failed(cls, muted: bool, error: PulseError) -> "MuteResult":
        status = (
            MuteStatus.DEVICE_NOT_FOUND
            if isinstance(error, DeviceNotFound)
            else MuteStatus.TRANSPORT_ERROR
        )
        return cls(muted=muted, status=status, error=error)


class MuteController:
    def __init__(self, transport: Transport):
        self.transport = transport

    def is_muted(self) -> bool:
        """Mute flag of the default sink, raising on any failure"""
        info = self.transport.server_info()
        sinks = self.transport.sinks()
        return require_device(sinks, info.default_sink, DeviceKind.SINK).muted

    def mute(self) -> MuteResult:
        """Mute flag of the default sink.

        On failure ``muted`` is False when the server info or sink list could
        not be fetched and True when the default sink is missing from the list.
        """
        try:
            return MuteResult(muted=self.is_muted())
        except DeviceNotFound as e:
            return MuteResult.failed(True, e)
        except PulseError as e:
            return MuteResult.failed(False, e)

    def set_mute(self, muted: bool) -> None:
        info = self.transport.server_info()
        self.set_sink_mute(muted, info.default_sink)

    def set_sink_mute(self, muted: bool, *sink_names: str) -> None:
        """Mute or unmute each sink in order, the default sink if none given.

        Stops at the first failing sink; later sinks are left untouched.
        """
        names = resolve_targets(
            sink_names, lambda: self.transport.server_info().default_sink
        )
        self._send_mute(Command.SET_SINK_MUTE, DeviceKind.SINK, muted, names)

    def set_source_mute(self, muted: bool, *source_names: str) -> None:
        names = resolve_targets(
            source_names, lambda: self.transport.server_info().default_source
        )
        self._send_mute(Command.SET_SOURCE_MUTE, DeviceKind.SOURCE, muted, names)

    def toggle_mute(self) -> MuteResult:
        """Invert the default sink's mute flag.

        ``muted`` is the intended new state. It is True when the server info
        or the current state could not be read, even though nothing changed.
        """
        try:
            self.transport.server_info()
        except PulseError as e:
            return MuteResult.failed(True, e)

        current = self.mute()
        if not current.ok:
            return MuteResult.failed(True, current.error)

        try:
            self.set_mute(not current.muted)
        except PulseError as e:
            return MuteResult.failed(not current.muted, e)
        return MuteResult(muted=not current.muted)

    def _send_mute(self, command: Command, kind: DeviceKind, muted: bool, names):
        for name in names:
            logger.debug(f"Sending {command.name} for {kind.value} {name}: {muted}")
            self.transport.request(command, set_mute_payload(name, muted))
            logger.info(f"{'Muted' if muted else 'Unmuted'} {kind.value} {name}")
