# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class TimeBucket(TypedDict):
    date: pendulum.Date
    label: str
