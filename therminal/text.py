#
# This file is part of the therminal project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""Text stream display: a timestamped block of readings every refresh period"""

import datetime
import email.utils
import time

import typer

from .config import Config
from .poll import classify, filter_readings, poll_all
from .reading import Reading, format_temperature
from .types import Callable, Iterable, Optional


def format_header(now: Optional[datetime.datetime] = None) -> str:
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    return f"\t# {email.utils.format_datetime(now)} #"


def format_reading(reading: Reading, threshold: Optional[float] = None) -> str:
    marker = classify(reading.temperature, threshold).marker
    return f"{reading.display_name}\t{format_temperature(reading.temperature):>4}\t{marker}"


def render(readings: Iterable[Reading], config: Config, now: Optional[datetime.datetime] = None) -> list[str]:
    lines = [format_header(now)]
    for reading in filter_readings(readings, config.sensor_id):
        lines.append(format_reading(reading, config.threshold))
    return lines


def run(
    config: Config,
    poll: Callable[[], list[Reading]] = poll_all,
    sleep: Callable[[float], None] = time.sleep,
    echo: Callable[[str], None] = typer.echo,
):
    """Print readings forever, every config.refresh_rate seconds"""
    while True:
        for line in render(poll(), config):
            echo(line)
        sleep(config.refresh_rate)
