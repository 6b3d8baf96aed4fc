from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, Repositories, build_container
from .shifts.model import Shift

logger = logging.getLogger(__name__)


def load_settings():
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def configure_logging(settings) -> None:
    level = str(getattr(settings, "LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_container(repositories: Repositories, *, settings=None) -> Container:
    """Bootstrap: settings module -> office shift -> calculators -> services."""
    if settings is None:
        settings = load_settings()
        configure_logging(settings)

    shift = Shift.from_settings(settings)
    logger.info(
        "office shift %s-%s, %d working hours/day, %d-day month",
        shift.start_time.strftime("%H:%M"),
        shift.end_time.strftime("%H:%M"),
        shift.working_hours_per_day,
        shift.days_per_month,
    )
    return build_container(shift=shift, repositories=repositories)
