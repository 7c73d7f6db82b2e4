from __future__ import annotations

import logging
import os

from car_costs.presentation.formatting import FormatSettings

DEFAULT_LOCALE = "en-GB"
DEFAULT_CURRENCY = "GBP"
DEFAULT_LOG_LEVEL = "INFO"


def display_locale() -> str:
    return os.getenv("CAR_COSTS_LOCALE") or DEFAULT_LOCALE


def display_currency() -> str:
    return (os.getenv("CAR_COSTS_CURRENCY") or DEFAULT_CURRENCY).upper()


def format_settings() -> FormatSettings:
    """
    Display settings for formatted amounts.

    Raises:
        ValueError: If CAR_COSTS_LOCALE names an unsupported locale
    """
    return FormatSettings(locale=display_locale(), currency=display_currency())


def log_level() -> int:
    name = (os.getenv("CAR_COSTS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)

    if not isinstance(level, int):
        raise RuntimeError(f"CAR_COSTS_LOG_LEVEL is not a valid logging level: {name}")

    return level
