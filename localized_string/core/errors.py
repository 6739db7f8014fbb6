from __future__ import annotations

from pathlib import Path


class LocalizationError(Exception):
    pass


class ResourceParseError(LocalizationError, ValueError):
    """A resource file exists but its content cannot be turned into a string map."""

    def __init__(self, path: str | Path, detail: str | None = None) -> None:
        message = f"Invalid resource file {path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.path = Path(path)
        self.detail = detail
