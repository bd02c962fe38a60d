#
# This file is part of the therminal project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""
Polling of every available sensor.

One bad sensor never spoils a poll: sensors that cannot be read or hold
garbage are logged and left out of the result.

```python
import time

from therminal.poll import poll_if_due

last_poll_time = 0
while True:
    if (result := poll_if_due(last_poll_time, 30)) is not None:
        last_poll_time = result.timestamp
        print(result.readings)
    time.sleep(0.2)
```
"""

import enum
import logging
import time

from .locator import discover
from .reading import Reading, ReadingError, parse
from .types import Callable, Iterable, NamedTuple, Optional, PathLike

log = logging.getLogger(__name__)


class Severity(enum.IntEnum):
    none = 0
    single = 1
    double = 2
    triple = 3

    @property
    def marker(self) -> str:
        return "!" * self.value


SEVERITY_FACTORS = (
    (1.5, Severity.triple),
    (1.2, Severity.double),
    (1.0, Severity.single),
)


class Poll(NamedTuple):
    """Readings of a poll together with the time (seconds since epoch) it was taken"""

    readings: list[Reading]
    timestamp: float


def iter_poll(
    discover: Callable[[], Iterable[PathLike]] = discover,
    parse: Callable[[PathLike], Optional[Reading]] = parse,
) -> Iterable[Reading]:
    for path in discover():
        try:
            reading = parse(path)
        except ReadingError as error:
            log.warning("skip sensor: %s", error)
            continue
        if reading is not None:
            yield reading


def poll_all(
    discover: Callable[[], Iterable[PathLike]] = discover,
    parse: Callable[[PathLike], Optional[Reading]] = parse,
) -> list[Reading]:
    """Read all sensors. The result may be empty"""
    return list(iter_poll(discover, parse))


def poll_if_due(
    last_poll_time: float,
    interval: float,
    now: Optional[float] = None,
    poll: Callable[[], list[Reading]] = poll_all,
) -> Optional[Poll]:
    """
    Poll only if more than interval seconds went by since last_poll_time.

    The caller owns the last poll time: it should keep the returned
    timestamp and give it back on the next call.

    Returns:
        Poll or None if it is still too early
    """
    if now is None:
        now = time.time()
    if now - last_poll_time <= interval:
        return None
    return Poll(poll(), now)


def classify(temperature: float, threshold: Optional[float]) -> Severity:
    """Severity of the temperature with respect to the (optional) threshold"""
    if threshold is None:
        return Severity.none
    for factor, severity in SEVERITY_FACTORS:
        if temperature > threshold * factor:
            return severity
    return Severity.none


def filter_readings(readings: Iterable[Reading], sensor_id: Optional[str] = None) -> list[Reading]:
    """Readings which display name ends with sensor_id (all of them if no sensor_id)"""
    if not sensor_id:
        return list(readings)
    return [reading for reading in readings if reading.display_name.endswith(sensor_id)]
