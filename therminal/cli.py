#
# This file is part of the therminal project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

import typer

from . import text, tui
from .config import DEFAULT_LOG_LEVEL, DEFAULT_REFRESH_RATE, Config, ConfigError, configure_logging
from .types import Optional

app = typer.Typer(add_completion=False)


def run(config: Config):
    if config.with_tui:
        tui.run(config)
    else:
        text.run(config)


@app.command()
def main(
    refresh_rate: int = typer.Option(
        DEFAULT_REFRESH_RATE, "--refresh", "-r", metavar="SEC", help="read sensor values again after SEC seconds"
    ),
    threshold: Optional[float] = typer.Option(
        None, "--threshold", "-t", metavar="C", help="mark readings above C, 1.2*C and 1.5*C with !, !! and !!!"
    ),
    sensor_id: Optional[str] = typer.Option(
        None, "--sensor-id", "-s", metavar="SENSOR", help="only show sensors which name ends with SENSOR"
    ),
    with_tui: bool = typer.Option(False, "--tui", help="Run with UI"),
    log_level: str = typer.Option(DEFAULT_LOG_LEVEL.lower(), "--log-level", help="debug, info, warning or error"),
    log_file: Optional[str] = typer.Option(None, "--log-file", metavar="PATH", help="write log messages to PATH"),
):
    """Show the temperature of the thermal sensors"""
    try:
        config = Config.from_options(
            refresh_rate=refresh_rate,
            threshold=threshold,
            sensor_id=sensor_id,
            with_tui=with_tui,
            log_level=log_level,
            log_file=log_file,
        )
    except ConfigError as error:
        raise typer.BadParameter(str(error)) from error
    configure_logging(config)
    try:
        run(config)
    except KeyboardInterrupt:
        typer.echo("\rCtrl-C pressed. Bailing out")


if __name__ == "__main__":
    app()
