#
# This file is part of the therminal project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

import dataclasses
import logging
from unittest import mock

import pytest

from therminal.config import LOG_FORMAT, Config, ConfigError, configure_logging


def test_defaults():
    config = Config()
    assert config.refresh_rate == 30
    assert config.threshold is None
    assert config.sensor_id is None
    assert config.with_tui is False
    assert config.log_level == "WARNING"
    assert config.log_file is None


def test_from_options():
    config = Config.from_options(refresh_rate="5", threshold="40.5", sensor_id="CPU", with_tui=True, log_level="debug")
    assert config == Config(refresh_rate=5, threshold=40.5, sensor_id="CPU", with_tui=True, log_level="DEBUG")
    assert Config.from_options(sensor_id="", log_file="") == Config()


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Config().refresh_rate = 10


@pytest.mark.parametrize("refresh_rate", ["0", "-1", "abc", "1.5", "", 0])
def test_invalid_refresh_rate(refresh_rate):
    with pytest.raises(ConfigError, match="refresh rate"):
        Config.from_options(refresh_rate=refresh_rate)


@pytest.mark.parametrize("threshold", ["hot", "", "nan", "inf"])
def test_invalid_threshold(threshold):
    with pytest.raises(ConfigError, match="threshold"):
        Config.from_options(threshold=threshold)


def test_invalid_log_level():
    with pytest.raises(ConfigError, match="log level"):
        Config.from_options(log_level="verbose")


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_configure_logging():
    with mock.patch("therminal.config.logging.basicConfig") as basic_config:
        configure_logging(Config(log_level="INFO"))
        basic_config.assert_called_once_with(level="INFO", format=LOG_FORMAT)

    with mock.patch("therminal.config.logging.basicConfig") as basic_config:
        configure_logging(Config(log_file="/tmp/therminal.log"))
        basic_config.assert_called_once_with(level="WARNING", format=LOG_FORMAT, filename="/tmp/therminal.log")
    assert logging.getLevelName("WARNING") == logging.WARNING
