#
# This file is part of the therminal project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""
Discovery of the sensor files exposed by the thermal and hwmon sysfs classes.

Thermal zones expose their value in `/sys/class/thermal/thermal_zone<N>/temp`
while hardware monitors use `/sys/class/hwmon/hwmon<N>/temp<M>_input`.
"""

import logging
import os
import re

from .sysfs import HWMON_PATH, THERMAL_PATH
from .types import Iterable, PathLike, Sequence

SENSOR_ROOTS = (THERMAL_PATH, HWMON_PATH)
MAX_DEPTH = 2

SENSOR_NAME_PATTERNS = (re.compile(r"temp"), re.compile(r"temp.*_input"))

log = logging.getLogger(__name__)


def is_sensor_name(name: str) -> bool:
    """Tells if the base name follows the thermal or the hwmon sensor file naming"""
    return any(pattern.fullmatch(name) for pattern in SENSOR_NAME_PATTERNS)


def _iter_walk(path: PathLike, depth: int, max_depth: int) -> Iterable[os.DirEntry]:
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except OSError as error:
        log.debug("skip %s: %r", path, error)
        return
    for entry in entries:
        yield entry
        if depth >= max_depth:
            continue
        try:
            is_dir = entry.is_dir(follow_symlinks=True)
        except OSError as error:
            log.debug("skip %s: %r", entry.path, error)
            continue
        if is_dir:
            yield from _iter_walk(entry.path, depth + 1, max_depth)


def iter_entries(root: PathLike, max_depth: int = MAX_DEPTH) -> Iterable[os.DirEntry]:
    """
    Walk the tree under root following symbolic links. The root is depth 0 so
    the default reaches `<root>/<device>/<file>`.
    Entries that cannot be visited are silently skipped.
    """
    if max_depth < 1:
        return
    yield from _iter_walk(root, 1, max_depth)


def iter_sensor_paths(roots: Sequence[PathLike] = SENSOR_ROOTS) -> Iterable[str]:
    """Returns an iterator over the sensor file paths found under the given roots"""
    for root in roots:
        for entry in iter_entries(root):
            if is_sensor_name(entry.name):
                yield entry.path


def discover(roots: Sequence[PathLike] = SENSOR_ROOTS) -> set[str]:
    """Set of candidate sensor file paths. No ordering should be assumed"""
    return set(iter_sensor_paths(roots))
