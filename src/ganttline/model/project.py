# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias, TypedDict

import pendulum

ProjectId: TypeAlias = str


class Project(TypedDict):
    """
    A bar on the chart. start and end are inclusive calendar dates; location
    is a short code such as an airport shown beside the name.
    """

    id: ProjectId
    name: str
    location: str
    start: pendulum.Date
    end: pendulum.Date
    color: str


def generate_project_id() -> ProjectId:
    return str(uuid.uuid4())
