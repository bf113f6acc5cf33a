# SPDX-License-Identifier: MIT

import re

DEFAULT_PROJECT_COLOR = "#007bff"

# Palette offered for new projects
PROJECT_COLORS = [
    "#007bff",
    "#28a745",
    "#dc3545",
    "#ffc107",
    "#6f42c1",
    "#fd7e14",
    "#20c997",
    "#e83e8c",
    "#6c757d",
    "#17a2b8",
    "#343a40",
    "#f8f9fa",
]

_HEX_COLOR_P = re.compile(r"^#[0-9a-fA-F]{6}$")


def is_hex_color(color: str) -> bool:
    return _HEX_COLOR_P.match(color) is not None
