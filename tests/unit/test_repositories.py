"""Unit tests for get_repository_details()."""

import pytest

from folio.contexts.content.records import ProjectRecord
from folio.contexts.content.repositories import get_repository_details

PROJECTS = (
    ProjectRecord(
        name="Route Planner",
        demo_link="https://planner.example.org",
        repository="route-planner",
        stack=("Flutter",),
        tags=("mobile",),
        description="Plans routes.",
    ),
    ProjectRecord(name="Sheet Uploader", demo_link="https://uploader.example.org"),
)


@pytest.mark.unit
def test_lookup_by_repository_name():
    details = get_repository_details("route-planner", PROJECTS)

    assert details.name == "route-planner"
    assert details.project == "Route Planner"
    assert details.demo_link == "https://planner.example.org"
    assert details.stack == ("Flutter",)
    assert details.tags == ("mobile",)


@pytest.mark.unit
def test_lookup_falls_back_to_project_name_case_insensitive():
    details = get_repository_details("sheet uploader", PROJECTS)
    assert details.name == "Sheet Uploader"
    assert details.description is None


@pytest.mark.unit
@pytest.mark.parametrize("name", ["unknown", "", "   ", None])
def test_unknown_repository_returns_none(name):
    assert get_repository_details(name, PROJECTS) is None


@pytest.mark.unit
def test_lookup_in_empty_collection():
    assert get_repository_details("route-planner", ()) is None
