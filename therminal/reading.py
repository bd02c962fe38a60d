#
# This file is part of the therminal project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""
Sensor readings.

A sensor file holds the temperature as an integer in milli-celsius,
usually followed by a new line:

```python
from therminal.reading import parse

reading = parse("/sys/class/thermal/thermal_zone0/temp")
print(f"{reading.name}: {reading.temperature:6.2f} C")
```
"""

import logging
import re

from .io import read_text
from .label import resolve_label
from .sysfs import squash
from .types import NamedTuple, Optional, PathLike

MILLI = 1000.0

UNSIGNED = re.compile(r"\+?[0-9]+")

log = logging.getLogger(__name__)


class ReadingError(ValueError):
    """Sensor file content is not a temperature"""

    def __init__(self, path, text):
        super().__init__(f"{path}: invalid temperature {text!r}")
        self.path = path
        self.text = text


class Reading(NamedTuple):
    """
    Single temperature reading

    Attributes:
        temperature (float): temperature in celsius
        sensor (str): path of the sensor file
        name (str): sensor label (may be empty)
        kind (str): sensor category (not classified, always empty)
    """

    temperature: float
    sensor: str
    name: str = ""
    kind: str = ""

    @property
    def display_name(self) -> str:
        return self.name or self.sensor

    def __str__(self):
        return f"{format_temperature(self.temperature)}C\t{self.sensor}\t{self.kind}\t{self.name}"


def format_temperature(temperature: float) -> str:
    """Exact text for the temperature without trailing zeros: 52.0 gives 52 and 45.5 gives 45.5"""
    return f"{temperature:.3f}".rstrip("0").rstrip(".")


def parse_value(text: str, path: PathLike = "") -> float:
    """
    Translate sensor file content (milli-celsius) into celsius.

    Raises:
        ReadingError: if the content is not an unsigned integer
    """
    value = squash(text)
    if not UNSIGNED.fullmatch(value):
        raise ReadingError(str(path), text)
    return int(value) / MILLI


def read_raw(path: PathLike) -> Optional[str]:
    """Content of the sensor file or None if it could not be read"""
    try:
        return read_text(path)
    except OSError as error:
        log.warning("path: %s, %s", path, error)


def parse(sensor_path: PathLike) -> Optional[Reading]:
    """
    Read the sensor file and build a Reading out of it.

    Returns None when the file could not be read (vanished sensor, no
    permission, ...).

    Raises:
        ReadingError: if the sensor file content is not a temperature
    """
    text = read_raw(sensor_path)
    if text is None:
        return None
    sensor = str(sensor_path)
    temperature = parse_value(text, sensor)
    return Reading(temperature, sensor, resolve_label(sensor))
