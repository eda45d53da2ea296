"""
Configuration for Pulse Control

Every setting has a default and can be overridden with a PULSE_CONTROL_*
environment variable, e.g. PULSE_CONTROL_PORT=8080.
"""

import os
from typing import Mapping, Optional
from pydantic import BaseModel, Field

from .audio.protocol import VOLUME_NORM

ENV_PREFIX = "PULSE_CONTROL_"


class Settings(BaseModel):
    # Fixed-point value that represents unity gain on the server. pactl
    # reports unity as 65536, so set 65536 when running on PactlTransport.
    volume_norm: int = Field(VOLUME_NORM, gt=0)
    # Highest boost callers are expected to use. Sets above it are logged as
    # warnings and still passed to the server as-is.
    boost_limit: float = Field(1.5, ge=1.0)
    pactl_path: str = "pactl"
    command_timeout: float = Field(5.0, gt=0)
    log_dir: str = "~/.local/log/pulse-control"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from defaults plus any PULSE_CONTROL_* overrides"""
    if environ is None:
        environ = os.environ

    overrides = {}
    for name in Settings.model_fields:
        value = environ.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            overrides[name] = value
    return Settings(**overrides)
