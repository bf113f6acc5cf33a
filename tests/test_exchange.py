# SPDX-License-Identifier: MIT

import json
import uuid
from pathlib import Path

import pendulum
import pytest

from conftest import ProjectFactory
from ganttline.errors import ProjectImportError, UnknownGranularityError
from ganttline.service.exchange import (
    default_export_file_name,
    export_projects,
    import_projects,
    read_projects_file,
    sample_projects,
)
from ganttline.timeline.layout import build_gantt_layout


class TestExport:
    def test_document_shape(self, project: ProjectFactory) -> None:
        migration = project("Database Migration", "2025-01-01", "2025-02-15", "ORD")

        content = export_projects(
            [migration],
            granularity="quarter",
            column_width=80,
            project_column_width=220,
            exported_at=pendulum.datetime(2025, 6, 1, 12, 0, tz="UTC"),
        )
        document = json.loads(content)

        assert document["projects"] == [
            {
                "id": migration["id"],
                "name": "Database Migration",
                "airport": "ORD",
                "startDate": "2025-01-01",
                "endDate": "2025-02-15",
                "color": "#007bff",
            }
        ]
        assert document["settings"] == {
            "timeScale": "quarters",
            "columnWidth": 80,
            "projectColumnWidth": 220,
        }
        assert document["exportedAt"].startswith("2025-06-01T12:00:00")

    def test_unknown_granularity(self) -> None:
        with pytest.raises(UnknownGranularityError):
            export_projects([], granularity="fortnight")  # type: ignore[arg-type]

    def test_settings_are_optional(self) -> None:
        document = json.loads(export_projects([]))
        assert document["projects"] == []
        assert document["settings"] == {}

    def test_export_then_import(self, project: ProjectFactory) -> None:
        projects = [
            project("Website Redesign", "2025-01-15", "2025-03-15"),
            project("Security Audit", "2025-03-01", "2025-04-15", "ATL", "#ffc107"),
        ]
        collection = import_projects(export_projects(projects, granularity="day"))

        assert collection["projects"] == projects
        assert collection["settings"] == {"granularity": "day"}


class TestImport:
    def test_browser_export_format(self) -> None:
        content = json.dumps(
            {
                "projects": [
                    {
                        "name": "Website Redesign",
                        "airport": "JFK",
                        "startDate": "2025-01-15T00:00:00.000Z",
                        "endDate": "2025-03-15T00:00:00.000Z",
                        "color": "#007bff",
                    }
                ],
                "settings": {
                    "timeScale": "weeks",
                    "columnWidth": 100,
                    "projectColumnWidth": 200,
                },
                "exportedAt": "2025-06-01T12:00:00.000Z",
            }
        )
        collection = import_projects(content)

        (imported,) = collection["projects"]
        assert uuid.UUID(imported["id"])
        assert imported["name"] == "Website Redesign"
        assert imported["location"] == "JFK"
        assert imported["start"] == pendulum.date(2025, 1, 15)
        assert imported["end"] == pendulum.date(2025, 3, 15)
        assert collection["settings"] == {
            "granularity": "week",
            "column_width": 100,
            "project_column_width": 200,
        }

    def test_generated_ids_are_unique(self) -> None:
        raw_project = {"name": "A", "startDate": "2025-01-01", "endDate": "2025-01-02"}
        content = json.dumps({"projects": [raw_project, raw_project]})

        first, second = import_projects(content)["projects"]
        assert first["id"] != second["id"]

    def test_existing_id_and_defaults(self) -> None:
        content = json.dumps(
            {
                "projects": [
                    {
                        "id": "project-1",
                        "location": "SFO",
                        "startDate": "2025-01-01",
                        "endDate": "2025-01-02",
                    }
                ]
            }
        )
        (imported,) = import_projects(content)["projects"]
        assert imported["id"] == "project-1"
        assert imported["location"] == "SFO"
        assert imported["name"] == ""
        assert imported["color"] == "#007bff"

    def test_invalid_color_falls_back_to_default(self) -> None:
        raw_project = {
            "name": "A",
            "startDate": "2025-01-01",
            "endDate": "2025-01-02",
            "color": "blue",
        }
        content = json.dumps({"projects": [raw_project]})
        (imported,) = import_projects(content)["projects"]
        assert imported["color"] == "#007bff"

    def test_singular_granularity_names(self) -> None:
        content = json.dumps({"projects": [], "settings": {"timeScale": "month"}})
        assert import_projects(content)["settings"] == {"granularity": "month"}

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            json.dumps([]),
            json.dumps({"settings": {}}),
            json.dumps({"projects": {"name": "A"}}),
            json.dumps({"projects": ["A"]}),
            json.dumps({"projects": [{"name": "A", "startDate": "2025-01-01"}]}),
            json.dumps(
                {
                    "projects": [
                        {"name": "A", "startDate": "someday", "endDate": "2025-01-01"}
                    ]
                }
            ),
            json.dumps({"projects": [], "settings": {"timeScale": "decades"}}),
            json.dumps({"projects": [], "settings": {"columnWidth": "wide"}}),
            json.dumps({"projects": [], "settings": {"columnWidth": -5}}),
            json.dumps({"projects": [], "settings": {"columnWidth": 0}}),
            json.dumps({"projects": [], "settings": {"columnWidth": "abc"}}),
            json.dumps({"projects": [], "settings": {"projectColumnWidth": -1}}),
            json.dumps({"projects": [], "settings": {"columnWidth": [100]}}),
        ],
    )
    def test_invalid_documents(self, content: str) -> None:
        with pytest.raises(ProjectImportError):
            import_projects(content)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ProjectImportError):
            read_projects_file(tmp_path / "missing.json")


class TestSampleProjects:
    def test_sample_collection(self) -> None:
        projects = sample_projects()
        assert [p["location"] for p in projects] == ["JFK", "LAX", "ORD", "ATL"]

    def test_sample_week_layout(self) -> None:
        layout = build_gantt_layout(sample_projects(), "week", column_width=100)

        # 2025-01-01 is a Wednesday, so the first week starts 2024-12-30
        assert layout["buckets"][0]["date"] == pendulum.date(2024, 12, 30)
        assert len(layout["buckets"]) == 22


def test_default_export_file_name() -> None:
    assert (
        default_export_file_name(pendulum.date(2025, 1, 2))
        == "gantt-chart-2025-01-02.json"
    )
