# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Callable

import pytest

from ganttline import configuration
from ganttline.model.project import Project, generate_project_id
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.time import date_from_str

ProjectFactory = Callable[..., Project]


def make_project(
    name: str,
    start: str,
    end: str,
    location: str = "JFK",
    color: str = "#007bff",
) -> Project:
    return {
        "id": generate_project_id(),
        "name": name,
        "location": location,
        "start": date_from_str(start),
        "end": date_from_str(end),
        "color": color,
    }


@pytest.fixture
def project() -> ProjectFactory:
    return make_project


@pytest.fixture
def overlapping_projects() -> list[Project]:
    return [
        make_project("Website Redesign", "2025-01-15", "2025-03-15"),
        make_project("Mobile App Development", "2025-02-01", "2025-05-30", "LAX"),
    ]


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration at a temporary directory with a fresh repository."""
    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)

    from ganttline.initialize import initialize

    initialize()
    return config_path
