"""
Main entry point for Pulse Control
"""

import os
import sys
import uvicorn
from fastapi import FastAPI
from loguru import logger

from .api import configure, router
from .audio.pactl import PACTL_VOLUME_NORM, PactlTransport
from .config import Settings, load_settings


def setup_logging(settings: Settings):
    """Setup logging configuration"""
    log_dir = os.path.expanduser(settings.log_dir)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, "pulse-control.log")
    logger.remove()
    logger.add(log_file, rotation="10 MB", retention="7 days")
    logger.add(sys.stderr, level=settings.log_level)


def create_app(settings: Settings) -> FastAPI:
    if settings.volume_norm != PACTL_VOLUME_NORM:
        logger.warning(
            f"volume_norm is {settings.volume_norm} but pactl reports unity gain as "
            f"{PACTL_VOLUME_NORM}; set PULSE_CONTROL_VOLUME_NORM={PACTL_VOLUME_NORM} "
            "for exact levels"
        )
    configure(
        PactlTransport(settings.pactl_path, settings.command_timeout),
        settings.volume_norm,
        settings.boost_limit,
    )
    app = FastAPI(title="Pulse Control")
    app.include_router(router)
    return app


def main():
    """Main entry point"""
    settings = load_settings()
    setup_logging(settings)
    logger.info("Starting Pulse Control")

    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
