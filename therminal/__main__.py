#
# This file is part of the therminal project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

from .cli import app

app(prog_name="therminal")
