#
# This file is part of the therminal project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""
Human readable sensor names.

A hwmon `temp1_input` is described by its `temp1_label` sibling. A thermal
zone `temp` is described by its `_type` sibling or, as sysfs names it, `type`.
"""

import logging

from .io import read_text
from .sysfs import squash
from .types import Optional, PathLike

HWMON_SUFFIX = "_input"
HWMON_LABEL_SUFFIX = "_label"
THERMAL_SUFFIX = "temp"
THERMAL_LABEL_SUFFIXES = ("_type", "type")

log = logging.getLogger(__name__)


def _replace_suffix(path: str, suffix: str, replacement: str) -> str:
    return path[: -len(suffix)] + replacement


def label_paths(sensor_path: PathLike) -> list[str]:
    """Candidate label files for the given sensor file, in order of preference"""
    path = str(sensor_path)
    if path.endswith(HWMON_SUFFIX):
        return [_replace_suffix(path, HWMON_SUFFIX, HWMON_LABEL_SUFFIX)]
    if path.endswith(THERMAL_SUFFIX):
        return [_replace_suffix(path, THERMAL_SUFFIX, suffix) for suffix in THERMAL_LABEL_SUFFIXES]
    return []


def read_label(path: PathLike) -> Optional[str]:
    try:
        return squash(read_text(path))
    except OSError as error:
        log.debug("no label in %s: %r", path, error)


def resolve_label(sensor_path: PathLike) -> str:
    """Best effort label for the sensor. Empty string if there is none"""
    for path in label_paths(sensor_path):
        label = read_label(path)
        if label is not None:
            return label
    return ""
