"""
Device lookup helpers shared by the volume and mute controllers
"""

from typing import Callable, Iterable, List, Optional, Sequence

from ..errors import DeviceNotFound
from ..models import Device, DeviceKind


def find_device(devices: Iterable[Device], name: str) -> Optional[Device]:
    """Get device by name"""
    for device in devices:
        if device.name == name:
            return device
    return None


def require_device(
    devices: Iterable[Device], name: str, kind: DeviceKind = DeviceKind.SINK
) -> Device:
    device = find_device(devices, name)
    if device is None:
        raise DeviceNotFound(name, kind.value)
    return device


def resolve_targets(names: Sequence[str], fallback: Callable[[], str]) -> List[str]:
    """Explicit names in order, or the fallback default when none are given"""
    if names:
        return list(names)
    return [fallback()]
