# SPDX-License-Identifier: MIT

import pytest

from ganttline.view.gantt import left_column_width_for


@pytest.mark.parametrize(
    "project_column_width, expected",
    [(200, 40), (100, 20), (203, 40), (20, 10), (1, 10)],
)
def test_left_column_width_for(project_column_width: int, expected: int) -> None:
    assert left_column_width_for(project_column_width) == expected
