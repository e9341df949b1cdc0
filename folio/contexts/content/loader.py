"""
Content Loader

Loads the experience and project collections (YAML) and the markdown pages that
make up the site's content. Everything is loaded wholesale once per build and
returned as immutable tuples.

Layout of a content directory:

    content/
        experience.yaml   # experience: [ {role, stack, details, ...}, ... ]
        projects.yaml     # projects: [ {name, demo_link, ...}, ... ]
        pages/*.md        # markdown pages with optional front matter
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Tuple, TypeVar

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from folio.contexts.content.exceptions import ContentLoadError
from folio.contexts.content.logger import log_collection_loaded
from folio.contexts.content.pages import ContentPage, load_pages
from folio.contexts.content.records import ExperienceRecord, ProjectRecord

load_dotenv()
CONTENT_PATH = Path(os.getenv("FOLIO_CONTENT_PATH", Path(__file__).parent / "data"))

EXPERIENCE_FILE = "experience.yaml"
PROJECTS_FILE = "projects.yaml"
PAGES_DIR = "pages"

RecordT = TypeVar("RecordT")


@dataclass(frozen=True)
class ContentCollection:
    """
    All content for one build.

    Attributes:
        experience: Career history, in display order
        projects: Project showcase entries, in display order
        pages: Markdown pages (drafts excluded), sorted by (order, slug)
    """

    experience: Tuple[ExperienceRecord, ...] = ()
    projects: Tuple[ProjectRecord, ...] = ()
    pages: Tuple[ContentPage, ...] = ()

    def get_page(self, slug: str):
        """Get a markdown page by slug, or None."""
        return next((page for page in self.pages if page.slug == slug), None)


def _load_collection(
    path: Path, key: str, factory: Callable[..., RecordT]
) -> Tuple[RecordT, ...]:
    """
    Load a top-level YAML list and build a record from each item.

    Raises:
        ContentLoadError: If the file is missing, unparsable, or `key` isn't a list
        InvalidRecordError: If an item fails record validation
    """
    path = Path(path)
    if not path.exists():
        raise ContentLoadError("Content file not found", path=path)

    try:
        loaded = OmegaConf.load(path)
    except (OmegaConfBaseException, ValueError) as e:
        raise ContentLoadError(f"Could not parse YAML: {e}", path=path) from e

    if not isinstance(loaded, DictConfig):
        raise ContentLoadError(f"Expected a mapping with a '{key}' list", path=path)

    data = OmegaConf.to_container(loaded, resolve=True)
    items = data.get(key)
    if items is None:
        items = []
    if not isinstance(items, list):
        raise ContentLoadError(f"'{key}' must be a list, got {type(items).__name__}", path=path)

    records = tuple(factory(item, index=index) for index, item in enumerate(items))
    log_collection_loaded(key, len(records), path)
    return records


def load_experience(path: Path = None) -> Tuple[ExperienceRecord, ...]:
    """Load experience.yaml (defaults to the content directory's copy)."""
    return _load_collection(path or CONTENT_PATH / EXPERIENCE_FILE, "experience", ExperienceRecord.from_dict)


def load_projects(path: Path = None) -> Tuple[ProjectRecord, ...]:
    """Load projects.yaml (defaults to the content directory's copy)."""
    return _load_collection(path or CONTENT_PATH / PROJECTS_FILE, "projects", ProjectRecord.from_dict)


def load_content(
    content_path: Path = None,
    markdown_extensions: Iterable[str] = (),
    include_pages: bool = True,
) -> ContentCollection:
    """
    Load every collection from a content directory.

    Args:
        content_path: Content directory (defaults to FOLIO_CONTENT_PATH or the packaged data)
        markdown_extensions: Extensions used to render markdown pages
        include_pages: Load pages/*.md (off when the markdown integration is disabled)

    Returns:
        ContentCollection
    """
    content_path = Path(content_path) if content_path is not None else CONTENT_PATH

    pages = ()
    if include_pages:
        pages = load_pages(content_path / PAGES_DIR, markdown_extensions)

    return ContentCollection(
        experience=load_experience(content_path / EXPERIENCE_FILE),
        projects=load_projects(content_path / PROJECTS_FILE),
        pages=pages,
    )
