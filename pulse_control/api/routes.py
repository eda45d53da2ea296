"""
API routes for Pulse Control
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from ..audio import MuteController, PactlTransport, Transport, VolumeController
from ..audio.protocol import VOLUME_NORM
from ..config import load_settings
from ..errors import DeviceNotFound, TransportError
from ..models import MuteState, MuteUpdate, VolumeState, VolumeUpdate

router = APIRouter(prefix="/api/v1")
_volume_controller: Optional[VolumeController] = None
_mute_controller: Optional[MuteController] = None


def configure(
    transport: Transport,
    volume_norm: int = VOLUME_NORM,
    boost_limit: Optional[float] = None,
):
    """Point the routes at a transport"""
    global _volume_controller, _mute_controller

    _volume_controller = VolumeController(transport, volume_norm, boost_limit)
    _mute_controller = MuteController(transport)


def initialize_controllers():
    """Fall back to a pactl transport built from the environment"""
    settings = load_settings()
    configure(
        PactlTransport(settings.pactl_path, settings.command_timeout),
        settings.volume_norm,
        settings.boost_limit,
    )


def get_volume_controller() -> VolumeController:
    if _volume_controller is None:
        initialize_controllers()
    return _volume_controller


def get_mute_controller() -> MuteController:
    if _mute_controller is None:
        initialize_controllers()
    return _mute_controller


def _http_error(action: str, e: Exception) -> HTTPException:
    logger.error(f"Error {action}: {e}")
    if isinstance(e, DeviceNotFound):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, TransportError):
        return HTTPException(status_code=502, detail=str(e))
    return HTTPException(status_code=500, detail=str(e))


@router.get("/volume")
def get_volume(
    controller: VolumeController = Depends(get_volume_controller),
) -> VolumeState:
    """Get default sink volume"""
    try:
        return VolumeState(volume=controller.get_volume())
    except Exception as e:
        raise _http_error("getting volume", e)


@router.put("/volume")
def set_volume(
    update: VolumeUpdate,
    controller: VolumeController = Depends(get_volume_controller),
):
    """Set default sink volume"""
    try:
        controller.set_volume(update.volume)
        return {"status": "ok"}
    except Exception as e:
        raise _http_error("setting volume", e)


@router.put("/sinks/{sink_name}/volume")
def set_sink_volume(
    sink_name: str,
    update: VolumeUpdate,
    controller: VolumeController = Depends(get_volume_controller),
):
    """Set volume of a named sink"""
    try:
        controller.set_sink_volume(sink_name, update.volume)
        return {"status": "ok"}
    except Exception as e:
        raise _http_error(f"setting volume for {sink_name}", e)


@router.get("/mute")
def get_mute(controller: MuteController = Depends(get_mute_controller)) -> MuteState:
    """Get default sink mute state"""
    result = controller.mute()
    if not result.ok:
        raise _http_error("getting mute state", result.error)
    return MuteState(muted=result.muted)


@router.put("/mute")
def set_sink_mute(
    update: MuteUpdate, controller: MuteController = Depends(get_mute_controller)
):
    """Mute or unmute sinks, the default sink if none are listed"""
    try:
        controller.set_sink_mute(update.muted, *update.devices)
        return {"status": "ok"}
    except Exception as e:
        raise _http_error("setting sink mute", e)


@router.put("/sources/mute")
def set_source_mute(
    update: MuteUpdate, controller: MuteController = Depends(get_mute_controller)
):
    """Mute or unmute sources, the default source if none are listed"""
    try:
        controller.set_source_mute(update.muted, *update.devices)
        return {"status": "ok"}
    except Exception as e:
        raise _http_error("setting source mute", e)


@router.post("/mute/toggle")
def toggle_mute(
    controller: MuteController = Depends(get_mute_controller),
) -> MuteState:
    """Toggle default sink mute state"""
    result = controller.toggle_mute()
    if not result.ok:
        raise _http_error("toggling mute", result.error)
    return MuteState(muted=result.muted)
