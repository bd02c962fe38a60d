#
# This file is part of the therminal project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""Readable sources: a regular file or, for the "-" path, standard input"""

import contextlib
import sys

from .types import Generator, PathLike, TextIO

STDIN = "-"


def is_stdin(path: PathLike) -> bool:
    return str(path) == STDIN


def fopen(path: PathLike) -> TextIO:
    return open(path, "r", encoding="utf-8", errors="replace")


@contextlib.contextmanager
def open_source(path: PathLike) -> Generator[TextIO, None, None]:
    """
    Open a readable source for the duration of the context.

    A regular file is closed on exit whatever happens inside the context.
    Standard input belongs to the process so it is left open.
    """
    if is_stdin(path):
        yield sys.stdin
        return
    with fopen(path) as fobj:
        yield fobj


def read_text(path: PathLike) -> str:
    """Read the whole content of the source. OSError propagates to the caller"""
    with open_source(path) as fobj:
        return fobj.read()
