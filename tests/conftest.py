#
# This file is part of the therminal project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

from pathlib import Path

import pytest


def write_file(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


@pytest.fixture
def write():
    """Helper that writes a file, creating missing parent directories"""
    return write_file


@pytest.fixture
def sysfs(tmp_path, write):
    """
    Fake sysfs class tree:

        class/thermal/thermal_zone0/{temp,type}
        class/thermal/thermal_zone1/temp        (no type)
        class/thermal/cooling_device0/cur_state
        class/hwmon/hwmon0 -> ../../devices/coretemp/hwmon/hwmon0
        devices/coretemp/hwmon/hwmon0/{name,temp1_input,temp1_label,temp2_input}
    """
    thermal = tmp_path / "class" / "thermal"
    write(thermal / "thermal_zone0" / "temp", "45000\n")
    write(thermal / "thermal_zone0" / "type", "x86_pkg_temp\n")
    write(thermal / "thermal_zone1" / "temp", "52000\n")
    write(thermal / "cooling_device0" / "cur_state", "0\n")

    device = tmp_path / "devices" / "coretemp" / "hwmon" / "hwmon0"
    write(device / "name", "coretemp\n")
    write(device / "temp1_input", "61000\n")
    write(device / "temp1_label", "Package id 0\n")
    write(device / "temp2_input", "58500\n")

    hwmon = tmp_path / "class" / "hwmon"
    hwmon.mkdir(parents=True)
    (hwmon / "hwmon0").symlink_to(device, target_is_directory=True)
    return tmp_path
