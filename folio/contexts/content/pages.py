"""
Markdown Content Pages

Parses markdown files with optional YAML front matter into ContentPage instances.
Front matter keys: title, description, draft, order, repository.

Example page:

    ---
    title: About
    order: 1
    ---
    # About me
    ...
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import markdown
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from folio.contexts.content.exceptions import ContentLoadError
from folio.contexts.content.logger import _log_debug, log_pages_loaded

FRONT_MATTER_DELIMITER = "---"
FRONT_MATTER_KEYS = {"title", "description", "draft", "order", "repository"}
DEFAULT_ORDER = 100


@dataclass(frozen=True)
class ContentPage:
    """
    A rendered markdown page.

    Attributes:
        slug: URL slug (file stem); the page is served at /<slug>/
        title: Page title (front matter, first "# " heading, or slug)
        description: Optional meta description
        html: Rendered page body
        draft: Drafts are parsed but never built
        order: Sort key for navigation (lower first)
        repository: Repository whose project card is shown under the page
    """

    slug: str
    title: str
    html: str
    description: Optional[str] = None
    draft: bool = False
    order: int = DEFAULT_ORDER
    repository: Optional[str] = None


def split_front_matter(text: str) -> Tuple[str, str]:
    """
    Split a markdown document into (front_matter_yaml, body).

    Front matter must open on the first line with '---' and close with a later '---'
    line. Documents without a closed block are returned whole as the body.
    """
    clean_text = text.lstrip("\ufeff")
    lines = clean_text.splitlines()
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return "", clean_text

    for end in range(1, len(lines)):
        if lines[end].strip() == FRONT_MATTER_DELIMITER:
            return "\n".join(lines[1:end]), "\n".join(lines[end + 1 :])

    return "", clean_text


def _extract_title(body: str) -> Tuple[Optional[str], str]:
    """Pull a leading '# heading' out of the body so it isn't rendered twice."""
    lines = body.splitlines()
    for i, line in enumerate(lines):
        stripped = line.strip()
        if stripped.startswith("# "):
            return stripped[2:].strip() or None, "\n".join(lines[i + 1 :]).lstrip()
        if stripped:
            break
    return None, body


def parse_content_page(path: Path, extensions: Iterable[str] = ()) -> ContentPage:
    """
    Parse a markdown file into a ContentPage.

    Args:
        path: Path to the .md file
        extensions: Python-Markdown extension names (e.g., "fenced_code", "tables")

    Returns:
        ContentPage with rendered HTML

    Raises:
        ContentLoadError: If the front matter is not a YAML mapping, has unknown keys or a malformed value
    """
    path = Path(path)
    front_matter, body = split_front_matter(path.read_text(encoding="utf-8"))

    meta = {}
    if front_matter.strip():
        try:
            parsed = OmegaConf.create(front_matter)
        except (OmegaConfBaseException, ValueError) as e:
            raise ContentLoadError(f"Invalid front matter: {e}", path=path) from e
        if not isinstance(parsed, DictConfig):
            raise ContentLoadError("Front matter must be a YAML mapping", path=path)
        meta = OmegaConf.to_container(parsed, resolve=True)

    unknown = sorted(set(meta) - FRONT_MATTER_KEYS, key=str)
    if unknown:
        raise ContentLoadError(f"Unknown front matter keys: {unknown}", path=path)

    heading, body = _extract_title(body)
    title = meta.get("title") or heading or path.stem.replace("-", " ").title()

    try:
        order = int(meta.get("order", DEFAULT_ORDER))
    except (TypeError, ValueError):
        raise ContentLoadError(f"'order' must be an integer, got {meta['order']!r}", path=path) from None

    draft = meta.get("draft", False)
    if not isinstance(draft, bool):
        raise ContentLoadError(f"'draft' must be true or false, got {draft!r}", path=path)

    repository = meta.get("repository")
    if repository is not None and not isinstance(repository, str):
        raise ContentLoadError(f"'repository' must be a string, got {repository!r}", path=path)

    html = markdown.markdown(body, extensions=list(extensions), output_format="html")

    return ContentPage(
        slug=path.stem.lower(),
        title=str(title),
        html=html,
        description=meta.get("description"),
        draft=draft,
        order=order,
        repository=repository,
    )


def load_pages(pages_dir: Path, extensions: Iterable[str] = ()) -> Tuple[ContentPage, ...]:
    """
    Load every *.md page in a directory, skipping drafts.

    A missing directory yields no pages.

    Returns:
        Pages sorted by (order, slug)
    """
    pages_dir = Path(pages_dir)
    if not pages_dir.is_dir():
        _log_debug(f"No pages directory at {pages_dir}")
        return ()

    extensions = list(extensions)
    pages: List[ContentPage] = []
    drafts = 0
    for path in sorted(pages_dir.glob("*.md")):
        page = parse_content_page(path, extensions)
        if page.draft:
            drafts += 1
            continue
        pages.append(page)

    pages.sort(key=lambda page: (page.order, page.slug))
    log_pages_loaded(pages, drafts, pages_dir)
    return tuple(pages)
