# SPDX-License-Identifier: MIT

import json
import logging
from pathlib import Path
from typing import Any, NotRequired, Optional, TypedDict

import pendulum

from ganttline import time
from ganttline.color import DEFAULT_PROJECT_COLOR, PROJECT_COLORS, is_hex_color
from ganttline.errors import ProjectImportError, UnknownGranularityError
from ganttline.model.granularity_type import GRANULARITIES, GranularityType
from ganttline.model.project import Project, generate_project_id

logger = logging.getLogger(__name__)

# Time scale names used in exported settings
TIME_SCALE_BY_GRANULARITY: dict[GranularityType, str] = {
    "day": "days",
    "week": "weeks",
    "month": "months",
    "quarter": "quarters",
    "year": "years",
}
GRANULARITY_BY_TIME_SCALE: dict[str, GranularityType] = {
    scale: granularity for granularity, scale in TIME_SCALE_BY_GRANULARITY.items()
}


class ExchangeSettings(TypedDict):
    granularity: NotRequired[GranularityType]
    column_width: NotRequired[int]
    project_column_width: NotRequired[int]


class ProjectCollection(TypedDict):
    projects: list[Project]
    settings: ExchangeSettings


def granularity_from_time_scale(value: str) -> GranularityType:
    """Accept both plural time scale names ("weeks") and granularity names."""
    if value in GRANULARITY_BY_TIME_SCALE:
        return GRANULARITY_BY_TIME_SCALE[value]
    if value in GRANULARITIES:
        return value  # type: ignore[return-value]
    raise ProjectImportError(f"unknown time scale: {value!r}")


def project_to_dict(project: Project) -> dict[str, Any]:
    return {
        "id": project["id"],
        "name": project["name"],
        "airport": project["location"],
        "startDate": time.date_to_iso_str(project["start"]),
        "endDate": time.date_to_iso_str(project["end"]),
        "color": project["color"],
    }


def project_from_dict(raw_project: dict[str, Any]) -> Project:
    if not isinstance(raw_project, dict):
        raise ProjectImportError(
            f"project entry must be an object, got {raw_project!r}"
        )

    try:
        start = time.date_from_str(str(raw_project["startDate"]))
        end = time.date_from_str(str(raw_project["endDate"]))
    except KeyError as e:
        raise ProjectImportError(f"project is missing {e.args[0]}") from e
    except ValueError as e:
        raise ProjectImportError(f"invalid project date: {e}") from e

    location = raw_project.get("airport", raw_project.get("location")) or ""

    color = str(raw_project.get("color") or DEFAULT_PROJECT_COLOR)
    if not is_hex_color(color):
        logger.warning("invalid color %r, using %s", color, DEFAULT_PROJECT_COLOR)
        color = DEFAULT_PROJECT_COLOR

    return {
        "id": raw_project.get("id") or generate_project_id(),
        "name": str(raw_project.get("name") or ""),
        "location": str(location),
        "start": start,
        "end": end,
        "color": color,
    }


def export_projects(
    projects: list[Project],
    granularity: Optional[GranularityType] = None,
    column_width: Optional[int] = None,
    project_column_width: Optional[int] = None,
    exported_at: Optional[pendulum.DateTime] = None,
) -> str:
    """
    Serialize projects and view settings to the JSON exchange document.

    Returns:
        Indented JSON with "projects", "settings" and "exportedAt" keys

    Raises:
        UnknownGranularityError: If granularity has no time scale name
    """
    settings: dict[str, Any] = {}
    if granularity is not None:
        if granularity not in TIME_SCALE_BY_GRANULARITY:
            raise UnknownGranularityError(granularity)
        settings["timeScale"] = TIME_SCALE_BY_GRANULARITY[granularity]
    if column_width is not None:
        settings["columnWidth"] = column_width
    if project_column_width is not None:
        settings["projectColumnWidth"] = project_column_width

    if exported_at is None:
        exported_at = time.now_utc()

    document = {
        "projects": [project_to_dict(project) for project in projects],
        "settings": settings,
        "exportedAt": time.datetime_to_iso_str(exported_at),
    }
    return json.dumps(document, indent=2)


def import_projects(content: str) -> ProjectCollection:
    """
    Read projects and optional view settings from the JSON exchange document.

    Projects without an id get a freshly generated one.

    Raises:
        ProjectImportError: If the document is not valid JSON, has no project
            list, or contains unparseable dates
    """
    try:
        document = json.loads(content)
    except json.JSONDecodeError as e:
        raise ProjectImportError(f"invalid JSON: {e}") from e

    if not isinstance(document, dict) or not isinstance(
        document.get("projects"), list
    ):
        raise ProjectImportError("document has no project list")

    projects = [project_from_dict(raw) for raw in document["projects"]]

    settings: ExchangeSettings = {}
    raw_settings = document.get("settings")
    if isinstance(raw_settings, dict):
        settings = _settings_from_dict(raw_settings)

    logger.info("imported %d projects", len(projects))
    return {"projects": projects, "settings": settings}


def _settings_from_dict(raw_settings: dict[str, Any]) -> ExchangeSettings:
    settings: ExchangeSettings = {}
    if raw_settings.get("timeScale"):
        settings["granularity"] = granularity_from_time_scale(
            str(raw_settings["timeScale"])
        )
    if raw_settings.get("columnWidth") is not None:
        settings["column_width"] = _width_from_settings(
            "columnWidth", raw_settings["columnWidth"]
        )
    if raw_settings.get("projectColumnWidth") is not None:
        settings["project_column_width"] = _width_from_settings(
            "projectColumnWidth", raw_settings["projectColumnWidth"]
        )
    return settings


def _width_from_settings(key: str, value: Any) -> int:
    try:
        width = int(value)
    except (TypeError, ValueError) as e:
        raise ProjectImportError(f"invalid settings: {key} {value!r}") from e
    if width <= 0:
        raise ProjectImportError(
            f"invalid settings: {key} must be positive, got {width}"
        )
    return width


def read_projects_file(path: Path) -> ProjectCollection:
    try:
        content = path.read_text()
    except OSError as e:
        raise ProjectImportError(f"cannot read {path}: {e}") from e
    return import_projects(content)


def write_projects_file(path: Path, content: str) -> None:
    path.write_text(content)
    logger.info("wrote %s", path)


def default_export_file_name(date: Optional[pendulum.Date] = None) -> str:
    if date is None:
        date = time.today_local()
    return f"gantt-chart-{time.date_to_iso_str(date)}.json"


def sample_projects() -> list[Project]:
    """Demo collection shown by a fresh installation."""
    raw_projects = [
        ("Website Redesign", "JFK", "2025-01-15", "2025-03-15"),
        ("Mobile App Development", "LAX", "2025-02-01", "2025-05-30"),
        ("Database Migration", "ORD", "2025-01-01", "2025-02-15"),
        ("Security Audit", "ATL", "2025-03-01", "2025-04-15"),
    ]
    return [
        {
            "id": generate_project_id(),
            "name": name,
            "location": location,
            "start": time.date_from_str(start),
            "end": time.date_from_str(end),
            "color": color,
        }
        for (name, location, start, end), color in zip(raw_projects, PROJECT_COLORS)
    ]
