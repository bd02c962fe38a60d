#
# This file is part of the therminal project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""
Human friendly monitor of the linux thermal sensors.

The heart of therminal is the [`poll_all`][therminal.poll.poll_all] helper
which discovers every sensor file exposed by sysfs and reads it:

```python
from therminal.poll import poll_all

for reading in poll_all():
    print(f"{reading.display_name}: {reading.temperature:6.2f} C")
```
"""

__version__ = "0.1.0"
