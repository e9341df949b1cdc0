"""Custom exceptions for the content context."""

from pathlib import Path
from typing import Optional


class InvalidRecordError(ValueError):
    """
    Exception raised when a content record fails validation.

    Attributes:
        message: Error description
        collection: Collection the record belongs to ('experience' or 'projects')
        index: Position of the record in its collection (0-indexed)
        field_name: Field that failed validation
    """

    def __init__(
        self,
        message: str,
        collection: Optional[str] = None,
        index: Optional[int] = None,
        field_name: Optional[str] = None,
    ):
        self.message = message
        self.collection = collection
        self.index = index
        self.field_name = field_name

        location = collection or "record"
        if index is not None:
            location += f"[{index}]"
        if field_name:
            location += f".{field_name}"

        super().__init__(f"{location}: {message}")


class ContentLoadError(Exception):
    """
    Exception raised when a content file is missing or structurally invalid.

    Attributes:
        message: Error description
        path: Path to the offending file
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path

        parts = [message]
        if path is not None:
            parts.append(f"File: {path}")

        super().__init__("\n".join(parts))
