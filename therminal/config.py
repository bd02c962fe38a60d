#
# This file is part of the therminal project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

import logging
import math
from dataclasses import dataclass

from .types import Optional, Self

DEFAULT_REFRESH_RATE = 30
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)-15s %(levelname)-5s %(name)s: %(message)s"


class ConfigError(ValueError):
    """Invalid configuration value"""


@dataclass(frozen=True)
class Config:
    refresh_rate: int = DEFAULT_REFRESH_RATE  # seconds
    threshold: Optional[float] = None  # celsius
    sensor_id: Optional[str] = None
    with_tui: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    @classmethod
    def from_options(
        cls,
        refresh_rate=DEFAULT_REFRESH_RATE,
        threshold=None,
        sensor_id: Optional[str] = None,
        with_tui: bool = False,
        log_level: str = DEFAULT_LOG_LEVEL,
        log_file: Optional[str] = None,
    ) -> Self:
        """
        Build a validated configuration from raw option values (text or numbers).

        Raises:
            ConfigError: if any of the values is invalid
        """
        return cls(
            refresh_rate=parse_refresh_rate(refresh_rate),
            threshold=parse_threshold(threshold),
            sensor_id=sensor_id or None,
            with_tui=with_tui,
            log_level=parse_log_level(log_level),
            log_file=log_file or None,
        )


def parse_refresh_rate(value) -> int:
    try:
        rate = int(str(value).strip())
    except ValueError:
        raise ConfigError(f"invalid refresh rate {value!r}: expected a number of seconds") from None
    if rate <= 0:
        raise ConfigError(f"invalid refresh rate {value!r}: must be positive")
    return rate


def parse_threshold(value) -> Optional[float]:
    if value is None:
        return None
    try:
        threshold = float(str(value).strip())
    except ValueError:
        raise ConfigError(f"invalid threshold {value!r}: expected a temperature in celsius") from None
    if not math.isfinite(threshold):
        raise ConfigError(f"invalid threshold {value!r}: must be finite")
    return threshold


def parse_log_level(value: str) -> str:
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"invalid log level {value!r}: expected one of {', '.join(LOG_LEVELS)}")
    return level


def configure_logging(config: Config) -> None:
    kwargs = {"level": config.log_level, "format": LOG_FORMAT}
    if config.log_file:
        kwargs["filename"] = config.log_file
    logging.basicConfig(**kwargs)
