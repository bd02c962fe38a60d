#
# This file is part of the therminal project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""
Interactive table of the sensor readings.

Keys:
    q, Esc: quit
    u: read the sensors now
    s: sort by the next column
"""

import collections
import contextlib
import curses
import enum
import locale
import logging
import time

import beautifultable

from .config import Config
from .poll import poll_all, poll_if_due
from .reading import Reading, format_temperature
from .types import Callable, Iterable, Optional

TITLE = "Thermal Info"
HELP = "q/Esc: quit | u: update | s: sort"
NO_READINGS = "no readings"
TICK_MS = 200
ESC = 27
LOG_BUFFER_SIZE = 1000

log = logging.getLogger(__name__)


class Column(enum.Enum):
    sensor = "Sensor", beautifultable.BeautifulTable.ALIGN_LEFT, False
    temp = "Temp (°C)", beautifultable.BeautifulTable.ALIGN_CENTER, False
    label = "Name", beautifultable.BeautifulTable.ALIGN_RIGHT, True

    def __init__(self, title, alignment, descending):
        self.title = title
        self.alignment = alignment
        self.descending = descending

    def text(self, reading: Reading) -> str:
        if self is Column.sensor:
            return reading.sensor
        elif self is Column.temp:
            return format_temperature(reading.temperature)
        return reading.name

    def key(self, reading: Reading):
        if self is Column.temp:
            return reading.temperature
        return self.text(reading)


COLUMNS = tuple(Column)


class ThermalTable:
    """Table model. Rows are replaced as a whole, never patched"""

    def __init__(self, items: Iterable[Reading] = ()):
        self._items: tuple[Reading, ...] = tuple(items)
        self.sort_column: Optional[Column] = None

    def __len__(self):
        return len(self._items)

    def set_items(self, items: Iterable[Reading]):
        self._items = tuple(items)

    @property
    def items(self) -> list[Reading]:
        if self.sort_column is None:
            return list(self._items)
        column = self.sort_column
        return sorted(self._items, key=column.key, reverse=column.descending)

    def sort_by(self, column: Optional[Column]):
        self.sort_column = column

    def next_sort(self) -> Optional[Column]:
        """Cycle sorting through: insertion order, then each column"""
        if self.sort_column is None:
            column = COLUMNS[0]
        else:
            index = COLUMNS.index(self.sort_column) + 1
            column = COLUMNS[index] if index < len(COLUMNS) else None
        self.sort_by(column)
        return column

    def rows(self) -> list[tuple[str, ...]]:
        return [tuple(column.text(item) for column in COLUMNS) for item in self.items]

    def render(self, width: int = 80) -> str:
        rows = self.rows()
        if not rows:
            return NO_READINGS
        table = beautifultable.BeautifulTable()
        table.maxwidth = width
        for row in rows:
            table.rows.append(row)
        table.columns.header = [column.title for column in COLUMNS]
        for index, column in enumerate(COLUMNS):
            table.columns.alignment[index] = column.alignment
        return str(table)


class TableApp:
    """
    State of the interactive display: the table and the time of the last poll.
    Independent of curses so it can be driven by any event loop.
    """

    def __init__(
        self,
        config: Config,
        poll: Callable[[], list[Reading]] = poll_all,
        clock: Callable[[], float] = time.time,
    ):
        self.config = config
        self.poll = poll
        self.clock = clock
        self.table = ThermalTable()
        self.last_poll_time = 0.0

    def refresh(self):
        self.table.set_items(self.poll())
        self.last_poll_time = self.clock()

    def tick(self) -> bool:
        """Poll if the refresh period is over. Returns True if the table changed"""
        result = poll_if_due(self.last_poll_time, self.config.refresh_rate, self.clock(), self.poll)
        if result is None:
            return False
        self.table.set_items(result.readings)
        self.last_poll_time = result.timestamp
        return True

    def handle_key(self, key: int) -> bool:
        """Handle a key press. Returns False when the user asked to quit"""
        if key in {ord("q"), ESC}:
            return False
        if key == ord("u"):
            self.refresh()
        elif key == ord("s"):
            column = self.table.next_sort()
            log.debug("sort by %s", column)
        return True

    def lines(self, width: int = 80) -> list[str]:
        header = f" {TITLE} ".center(width, "=")
        return [header, *self.table.render(width).splitlines(), "", HELP]


def draw(screen, app: TableApp):
    height, width = screen.getmaxyx()
    screen.erase()
    for y, line in enumerate(app.lines(max(width - 1, 1))[:height]):
        screen.addnstr(y, 0, line, max(width - 1, 1))
    screen.refresh()


def loop(screen, app: TableApp):
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.timeout(TICK_MS)
    app.refresh()
    while True:
        draw(screen, app)
        key = screen.getch()
        if key != -1 and not app.handle_key(key):
            break
        app.tick()


class LogBuffer(logging.Handler):
    """Keeps the last log records in memory"""

    def __init__(self, size: int = LOG_BUFFER_SIZE):
        super().__init__()
        self.records = collections.deque(maxlen=size)

    def emit(self, record):
        self.records.append(record)


def is_console_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)


@contextlib.contextmanager
def hold_console_logs(logger: Optional[logging.Logger] = None):
    """
    Detach the console handlers of the logger during the context so they
    don't write over the screen. Records are replayed on them at exit.
    """
    if logger is None:
        logger = logging.getLogger()
    handlers = [handler for handler in logger.handlers if is_console_handler(handler)]
    if not handlers:
        yield
        return
    buffer = LogBuffer()
    for handler in handlers:
        logger.removeHandler(handler)
    logger.addHandler(buffer)
    try:
        yield buffer
    finally:
        logger.removeHandler(buffer)
        for handler in handlers:
            logger.addHandler(handler)
            for record in buffer.records:
                handler.handle(record)


def run(config: Config, poll: Callable[[], list[Reading]] = poll_all):
    locale.setlocale(locale.LC_ALL, "")
    app = TableApp(config, poll)
    with hold_console_logs():
        curses.wrapper(loop, app)
