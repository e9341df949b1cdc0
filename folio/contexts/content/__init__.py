"""
Content Context

Responsibilities:
- Defines the experience and project record shapes
- Loads and validates YAML collections and markdown pages
- Resolves repository names to project details

Owns: ExperienceRecord, ProjectRecord, ContentPage, ContentCollection
Never: Decides how content is laid out or rendered
"""

from folio.contexts.content.exceptions import ContentLoadError, InvalidRecordError
from folio.contexts.content.loader import (
    ContentCollection,
    load_content,
    load_experience,
    load_projects,
)
from folio.contexts.content.pages import ContentPage, load_pages, parse_content_page
from folio.contexts.content.records import ExperienceRecord, ProjectRecord
from folio.contexts.content.repositories import RepositoryDetails, get_repository_details

__all__ = [
    # Records
    "ExperienceRecord",
    "ProjectRecord",
    "ContentPage",
    "ContentCollection",
    "RepositoryDetails",
    # Loading
    "load_content",
    "load_experience",
    "load_projects",
    "load_pages",
    "parse_content_page",
    # Lookup
    "get_repository_details",
    # Errors
    "ContentLoadError",
    "InvalidRecordError",
]
