#
# This file is part of the therminal project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

from pathlib import Path

MOUNT_PATH = Path("/sys")
CLASS_PATH = MOUNT_PATH / "class"
THERMAL_PATH = CLASS_PATH / "thermal"
HWMON_PATH = CLASS_PATH / "hwmon"


def squash(text: str) -> str:
    """
    Remove every whitespace from the text by joining its whitespace separated
    tokens without separator. So `" 45000\\n"` gives `"45000"` and
    `"Package id 0\\n"` gives `"Packageid0"`
    """
    return "".join(text.split())
