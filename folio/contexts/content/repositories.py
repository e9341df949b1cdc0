"""
Repository lookup for project cards.

Resolves a repository name to the details shown on a project card, using the
project records already loaded for the build.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from folio.contexts.content.records import ProjectRecord


@dataclass(frozen=True)
class RepositoryDetails:
    """Details rendered for a named repository."""

    name: str
    project: str
    demo_link: str
    description: Optional[str] = None
    stack: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    post_link: Optional[str] = None


def get_repository_details(
    name: str, projects: Iterable[ProjectRecord]
) -> Optional[RepositoryDetails]:
    """
    Get details for a named repository.

    Matches project.repository first, then project.name, both case-insensitively.
    Unknown names return None so callers can simply render nothing.

    Args:
        name: Repository name (e.g., "randu-sales-mobile")
        projects: Loaded project records

    Returns:
        RepositoryDetails or None
    """
    if not name or not name.strip():
        return None

    wanted = name.strip().lower()
    projects = tuple(projects)

    match = next(
        (p for p in projects if p.repository and p.repository.lower() == wanted), None
    ) or next((p for p in projects if p.name.lower() == wanted), None)

    if match is None:
        return None

    return RepositoryDetails(
        name=match.repository or match.name,
        project=match.name,
        demo_link=match.demo_link,
        description=match.description,
        stack=match.stack,
        tags=match.tags,
        post_link=match.post_link,
    )
