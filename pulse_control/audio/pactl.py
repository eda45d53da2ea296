"""
Transport backed by the pactl command-line client
"""

import json
import subprocess
from typing import Any, List, Optional

from loguru import logger
from pydantic import ValidationError

from ..errors import ProtocolError, TransportError
from ..models import Device, ServerInfo
from .protocol import INVALID_INDEX, Command, decode_fields

# pactl --format=json reports unity gain as 0x10000
PACTL_VOLUME_NORM = 0x10000

_MUTE_COMMANDS = {
    Command.SET_SINK_MUTE: "set-sink-mute",
    Command.SET_SOURCE_MUTE: "set-source-mute",
}


class PactlTransport:
    """Runs pactl for every query and command.

    pactl keeps its own connection to the server per invocation, so nothing
    here is shared between calls.
    """

    def __init__(self, pactl_path: str = "pactl", timeout: float = 5.0):
        self.pactl_path = pactl_path
        self.timeout = timeout

    def _run(self, *args: str, command: Optional[int] = None) -> str:
        cmd = [self.pactl_path, *args]
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=self.timeout
            )
        except FileNotFoundError:
            raise TransportError(f"{self.pactl_path} not found in PATH", command)
        except subprocess.TimeoutExpired:
            raise TransportError(
                f"{' '.join(cmd)} timed out after {self.timeout}s", command
            )

        if result.returncode != 0:
            raise TransportError(
                f"{' '.join(cmd)} failed ({result.returncode}): {result.stderr.strip()}",
                command,
            )
        return result.stdout

    def _query(self, *args: str) -> Any:
        output = self._run("--format=json", *args)
        try:
            return json.loads(output)
        except json.JSONDecodeError as e:
            raise TransportError(f"Failed to parse pactl {' '.join(args)} output: {e}")

    def server_info(self) -> ServerInfo:
        info = self._query("info")
        try:
            # pactl reports null when no default device is set
            return ServerInfo(
                default_sink=info.get("default_sink_name") or "",
                default_source=info.get("default_source_name") or "",
            )
        except (AttributeError, ValidationError) as e:
            raise TransportError(f"Unexpected pactl info output: {e}")

    def _devices(self, kind: str) -> List[Device]:
        entries = self._query("list", kind)
        if not isinstance(entries, list):
            raise TransportError(f"Unexpected pactl {kind} output: {entries!r}")

        devices = []
        for entry in entries:
            try:
                channels = (entry.get("volume") or {}).values()
                devices.append(
                    Device(
                        name=entry["name"],
                        cvolume=[int(channel["value"]) for channel in channels],
                        muted=bool(entry.get("mute", False)),
                    )
                )
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise TransportError(f"Unexpected pactl {kind} entry {entry!r}: {e!r}")
        return devices

    def sinks(self) -> List[Device]:
        return self._devices("sinks")

    def sources(self) -> List[Device]:
        return self._devices("sources")

    def request(self, command: Command, payload: bytes) -> bytes:
        try:
            fields = decode_fields(payload)
        except ProtocolError as e:
            raise TransportError(f"Malformed payload for {command!r}: {e}", command)
        if len(fields) != 3:
            raise TransportError(
                f"Expected 3 fields for {command!r}, got {len(fields)}", command
            )

        index, name, value = fields
        target = name if index == INVALID_INDEX else str(index)

        if command == Command.SET_SINK_VOLUME:
            args = ["set-sink-volume", target, *(str(v) for v in value)]
        elif command in _MUTE_COMMANDS:
            args = [_MUTE_COMMANDS[command], target, "1" if value else "0"]
        else:
            raise TransportError(f"Unsupported command {command!r}", command)

        return self._run(*args, command=command).encode()
