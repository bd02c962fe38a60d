#
# This file is part of the therminal project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

import datetime
from unittest import mock

import pytest

from therminal import text
from therminal.config import Config
from therminal.reading import Reading

NOW = datetime.datetime(2026, 10, 17, 9, 5, 3, tzinfo=datetime.timezone.utc)

READINGS = [
    Reading(52.0, "/sys/class/thermal/thermal_zone0/temp", ""),
    Reading(30.0, "/sys/class/hwmon/hwmon0/temp1_input", "CPU"),
    Reading(65.5, "/sys/class/hwmon/hwmon1/temp1_input", "edge_GPU"),
]


def test_format_header():
    assert text.format_header(NOW) == "\t# Sat, 17 Oct 2026 09:05:03 +0000 #"
    assert text.format_header().startswith("\t# ")


@pytest.mark.parametrize(
    "reading, threshold, expected",
    [
        (READINGS[0], 40.0, "/sys/class/thermal/thermal_zone0/temp\t  52\t!!"),
        (Reading(45.0, "/sys/class/thermal/thermal_zone1/temp", ""), 40.0, "/sys/class/thermal/thermal_zone1/temp\t  45\t!"),
        (Reading(48.0, "/x/temp", "edge"), 40.0, "edge\t  48\t!"),
        (READINGS[1], 40.0, "CPU\t  30\t"),
        (READINGS[2], 40.0, "edge_GPU\t65.5\t!!!"),
        (READINGS[2], 50.0, "edge_GPU\t65.5\t!!"),
        (READINGS[2], None, "edge_GPU\t65.5\t"),
        (Reading(105.25, "/x/temp", "hot"), None, "hot\t105.25\t"),
    ],
)
def test_format_reading(reading, threshold, expected):
    assert text.format_reading(reading, threshold) == expected


def test_render():
    lines = text.render(READINGS, Config(threshold=40.0), NOW)
    assert lines == [
        "\t# Sat, 17 Oct 2026 09:05:03 +0000 #",
        "/sys/class/thermal/thermal_zone0/temp\t  52\t!!",
        "CPU\t  30\t",
        "edge_GPU\t65.5\t!!!",
    ]


def test_render_filtered():
    lines = text.render(READINGS, Config(sensor_id="GPU"), NOW)
    assert lines[1:] == ["edge_GPU\t65.5\t"]


def test_render_no_readings():
    assert text.render([], Config(), NOW) == ["\t# Sat, 17 Oct 2026 09:05:03 +0000 #"]


class Stop(Exception):
    pass


def test_run():
    echo = mock.Mock()
    sleep = mock.Mock(side_effect=[None, Stop()])
    poll = mock.Mock(side_effect=[READINGS[:1], READINGS[1:2]])
    with pytest.raises(Stop):
        text.run(Config(refresh_rate=7, threshold=40.0), poll=poll, sleep=sleep, echo=echo)
    assert poll.call_count == 2
    assert sleep.call_args_list == [mock.call(7), mock.call(7)]
    printed = [call.args[0] for call in echo.call_args_list]
    assert len(printed) == 4
    assert printed[1] == "/sys/class/thermal/thermal_zone0/temp\t  52\t!!"
    assert printed[3] == "CPU\t  30\t"
