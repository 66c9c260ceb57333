"""Custom exceptions for the dataset context."""

from pathlib import Path
from typing import Optional


class InvalidCVDataError(ValueError):
    """
    Exception raised when the CV dataset YAML is missing fields or holds bad values.

    Attributes:
        message: Error description
        field_path: Dotted path of the offending field (e.g., 'skills[2]')
        source_path: YAML file the dataset was loaded from
    """

    def __init__(
        self,
        message: str,
        field_path: Optional[str] = None,
        source_path: Optional[Path] = None,
    ):
        self.message = message
        self.field_path = field_path
        self.source_path = source_path

        parts = [message]

        if field_path:
            parts.append(f"Field: {field_path}")

        if source_path:
            parts.append(f"Source: {source_path}")

        super().__init__("\n".join(parts))
