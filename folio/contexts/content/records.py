"""
Content Record Data Structures

Defines the two hand-authored record shapes shown on the site:
- ExperienceRecord: one career history entry
- ProjectRecord: one project showcase card

Records are immutable and validated on construction from YAML dicts. Source keys
may be snake_case or camelCase (demoLink, postLink, appStore, playStore).
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

from folio.contexts.content.exceptions import InvalidRecordError
from folio.utils.urls import host_of, is_absolute_http_url

# Store links must point at the official store hosts
STORE_HOSTS = {
    "app_store": "apps.apple.com",
    "play_store": "play.google.com",
}

EXPERIENCE_ALIASES = {"appStore": "app_store", "playStore": "play_store"}
PROJECT_ALIASES = {"demoLink": "demo_link", "postLink": "post_link"}


def _normalize_keys(data: Dict[str, Any], aliases: Dict[str, str], collection: str, index) -> Dict[str, Any]:
    """Map camelCase aliases to field names, rejecting duplicates."""
    if not isinstance(data, dict):
        raise InvalidRecordError(
            f"expected a mapping, got {type(data).__name__}", collection=collection, index=index
        )

    normalized = {}
    for key, value in data.items():
        name = aliases.get(key, key)
        if name in normalized:
            raise InvalidRecordError(
                f"field given twice (as '{key}' and its alias)",
                collection=collection,
                index=index,
                field_name=name,
            )
        normalized[name] = value
    return normalized


def _reject_unknown(data: Dict[str, Any], allowed, collection: str, index) -> None:
    unknown = sorted(set(data) - set(allowed), key=str)
    if unknown:
        raise InvalidRecordError(
            f"unknown field(s) {unknown}; allowed fields: {sorted(allowed)}",
            collection=collection,
            index=index,
            field_name=str(unknown[0]),
        )


def _required_text(data, name, collection, index) -> str:
    value = data.get(name)
    if not isinstance(value, str) or not value.strip():
        raise InvalidRecordError(
            "required non-empty string", collection=collection, index=index, field_name=name
        )
    return value.strip()


def _optional_text(data, name, collection, index) -> Optional[str]:
    value = data.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidRecordError(
            f"expected a string, got {type(value).__name__}",
            collection=collection,
            index=index,
            field_name=name,
        )
    return value.strip() or None


def _string_list(data, name, collection, index) -> Tuple[str, ...]:
    value = data.get(name)
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise InvalidRecordError(
            "expected a list of strings", collection=collection, index=index, field_name=name
        )
    items = []
    for position, item in enumerate(value):
        if not isinstance(item, str) or not item.strip():
            raise InvalidRecordError(
                f"item {position} must be a non-empty string",
                collection=collection,
                index=index,
                field_name=name,
            )
        items.append(item.strip())
    return tuple(items)


@dataclass(frozen=True)
class ExperienceRecord:
    """
    A career history entry.

    Attributes:
        role: Role title, usually "Title (Company)"
        stack: Technology-stack summary
        details: Ordered bullet descriptions (empty when the source omits them)
        app_store: Optional App Store link (apps.apple.com)
        play_store: Optional Google Play link (play.google.com)
    """

    role: str
    stack: str
    details: Tuple[str, ...] = ()
    app_store: Optional[str] = None
    play_store: Optional[str] = None

    FIELDS = ("role", "stack", "details", "app_store", "play_store")

    @property
    def has_store_links(self) -> bool:
        return bool(self.app_store or self.play_store)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], index: int = None) -> "ExperienceRecord":
        """
        Build and validate an experience record from a YAML dict.

        Raises:
            InvalidRecordError: If a required field is missing, `details` is present
                but empty, a store link is not a link to its store, or a field is unknown
        """
        collection = "experience"
        data = _normalize_keys(data, EXPERIENCE_ALIASES, collection, index)
        _reject_unknown(data, cls.FIELDS, collection, index)

        details = _string_list(data, "details", collection, index)
        if "details" in data and not details:
            raise InvalidRecordError(
                "must be non-empty when present",
                collection=collection,
                index=index,
                field_name="details",
            )

        store_links = {}
        for name, expected_host in STORE_HOSTS.items():
            url = _optional_text(data, name, collection, index)
            if url is not None:
                if not url.startswith("https://") or host_of(url) != expected_host:
                    raise InvalidRecordError(
                        f"expected an https link on {expected_host}, got {url!r}",
                        collection=collection,
                        index=index,
                        field_name=name,
                    )
            store_links[name] = url

        return cls(
            role=_required_text(data, "role", collection, index),
            stack=_required_text(data, "stack", collection, index),
            details=details,
            **store_links,
        )

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["details"] = list(self.details)
        return result


@dataclass(frozen=True)
class ProjectRecord:
    """
    A project showcase entry.

    The field set is closed: unknown keys are rejected at load time.

    Attributes:
        name: Project name
        demo_link: Live demo URL (always present, absolute http(s))
        tags: Category tags, de-duplicated in first-seen order
        stack: Technologies used
        description: Optional short description
        post_link: Optional write-up link (absolute URL or site-relative path)
        repository: Optional repository name, used by get_repository_details()
    """

    name: str
    demo_link: str
    tags: Tuple[str, ...] = ()
    stack: Tuple[str, ...] = ()
    description: Optional[str] = None
    post_link: Optional[str] = None
    repository: Optional[str] = None

    FIELDS = ("name", "demo_link", "tags", "stack", "description", "post_link", "repository")

    @classmethod
    def from_dict(cls, data: Dict[str, Any], index: int = None) -> "ProjectRecord":
        """
        Build and validate a project record from a YAML dict.

        Raises:
            InvalidRecordError: If name/demo_link are missing, demo_link is not a URL,
                post_link is neither a URL nor a site path, or a field is unknown
        """
        collection = "projects"
        data = _normalize_keys(data, PROJECT_ALIASES, collection, index)
        _reject_unknown(data, cls.FIELDS, collection, index)

        demo_link = _required_text(data, "demo_link", collection, index)
        if not is_absolute_http_url(demo_link):
            raise InvalidRecordError(
                f"expected an absolute http(s) URL, got {demo_link!r}",
                collection=collection,
                index=index,
                field_name="demo_link",
            )

        post_link = _optional_text(data, "post_link", collection, index)
        if post_link is not None and not (
            is_absolute_http_url(post_link) or post_link.startswith("/")
        ):
            raise InvalidRecordError(
                f"expected a URL or a path starting with '/', got {post_link!r}",
                collection=collection,
                index=index,
                field_name="post_link",
            )

        # Tags are set-like
        tags = tuple(dict.fromkeys(_string_list(data, "tags", collection, index)))

        return cls(
            name=_required_text(data, "name", collection, index),
            demo_link=demo_link,
            tags=tags,
            stack=_string_list(data, "stack", collection, index),
            description=_optional_text(data, "description", collection, index),
            post_link=post_link,
            repository=_optional_text(data, "repository", collection, index),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["tags"] = list(self.tags)
        result["stack"] = list(self.stack)
        return result
