# SPDX-License-Identifier: MIT

from typing import TypedDict

import platformdirs

from ganttline.model.granularity_type import GranularityType

APP_NAME = "ganttline"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    default_granularity: GranularityType
    column_width: int
    project_column_width: int
    week_starts_on: str
    strict_positions: bool
    show_header: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "default_granularity": "week",
        "column_width": 100,
        "project_column_width": 200,
        "week_starts_on": "monday",
        "strict_positions": False,
        "show_header": True,
        "log_level": "WARNING",
    }
