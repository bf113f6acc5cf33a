# SPDX-License-Identifier: MIT

from typing import NamedTuple


class PositionRange(NamedTuple):
    """Inclusive, zero-based bucket index span occupied by a project bar."""

    start_index: int
    end_index: int

    @property
    def width(self) -> int:
        return max(1, self.end_index - self.start_index + 1)
