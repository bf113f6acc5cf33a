# SPDX-License-Identifier: MIT


class GanttlineError(Exception):
    """Base class for errors raised by ganttline."""


class UnknownGranularityError(GanttlineError, ValueError):
    def __init__(self, granularity: str) -> None:
        super().__init__(f"unknown granularity: {granularity!r}")
        self.granularity = granularity


class EmptyTimelineError(GanttlineError):
    """Raised when a bar position is requested against an empty bucket list."""


class TimelineMismatchError(GanttlineError):
    """Raised in strict mode when a project lies outside the bucket span."""

    def __init__(self, project_name: str, message: str) -> None:
        super().__init__(f"{project_name}: {message}")
        self.project_name = project_name


class ProjectImportError(GanttlineError):
    """Raised when a project collection cannot be read from its JSON form."""
