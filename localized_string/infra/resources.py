"""File-backed resource store with culture-aware file resolution."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional

from ..core.config import LocalizerOptions
from ..core.culture import detect_ambient_culture, primary_subtag, validate_culture
from ..core.logging_config import get_logger
from . import formats

log = get_logger(__name__)


def file_name(base_path: str | Path, culture_part: str, default_culture: str, extension: str) -> str:
    """Resource file name for one culture; the default culture has no suffix."""
    if (
        not culture_part
        or culture_part == default_culture
        or culture_part == primary_subtag(default_culture)
    ):
        return f"{base_path}.{extension}"
    return f"{base_path}-{culture_part}.{extension}"


def resolve_existing_file(
    base_path: str | Path,
    current_culture: str,
    default_culture: str,
    extension: str,
    exists: Callable[[str], bool] = os.path.exists,
) -> Optional[str]:
    """First existing candidate of: language file, full culture file, default file.

    ``en-GB`` probes ``base-en``, then ``base-en-GB``, then ``base``. Returns
    None when no candidate exists.
    """
    for culture in (primary_subtag(current_culture), current_culture, ""):
        candidate = file_name(base_path, culture, default_culture, extension)
        if exists(candidate):
            return candidate
        log.debug("Resource file %s not found", candidate)
    log.info("No resource file found for %s", base_path)
    return None


class LocalizedStringResources:
    """Reads and writes resource files for the current culture.

    Not thread safe: ``set_culture`` mutates instance state. Pass ``culture=``
    to ``read``/``write`` to pin a culture for a single call instead.
    """

    def __init__(self, options: LocalizerOptions, ambient_culture: Optional[str] = None) -> None:
        self.options = options
        if ambient_culture is None:
            ambient_culture = detect_ambient_culture()
        self._current_culture = self._validate(ambient_culture)
        log.debug("Resources created with culture %s (ambient %r)", self._current_culture, ambient_culture)

    @property
    def current_culture(self) -> str:
        return self._current_culture

    @property
    def default_culture(self) -> str:
        return self.options.default_culture

    @property
    def extension(self) -> str:
        return self.options.RESOURCES_EXTENSION

    def _validate(self, culture: Optional[str]) -> str:
        return validate_culture(culture, self.options.SUPPORTED_CULTURES, self.default_culture)

    def _culture_for_call(self, culture: Optional[str]) -> str:
        return self._current_culture if culture is None else self._validate(culture)

    def set_culture(self, culture: str) -> None:
        self._current_culture = self._validate(culture)
        log.debug("Setting culture to %s (culture set to %s)", culture, self._current_culture)

    def base_path(self, base_name: str) -> Path:
        return self.options.resources_root / base_name

    def resolve(self, base_name: str, culture: Optional[str] = None) -> Optional[Path]:
        found = resolve_existing_file(
            self.base_path(base_name),
            self._culture_for_call(culture),
            self.default_culture,
            self.extension,
        )
        return Path(found) if found is not None else None

    def read(self, base_name: str, culture: Optional[str] = None) -> Dict[str, str]:
        """Strings for ``base_name``; an empty dict when no file matches."""
        log.debug("Read resources for %s using %s", base_name, self.options.resources_root)
        path = self.resolve(base_name, culture)
        if path is None:
            return {}
        log.debug("Reading file %s", path)
        return self.parse_file(path)

    def write(self, base_name: str, content: Mapping[str, str], culture: Optional[str] = None) -> Mapping[str, str]:
        """Replace the file of the current (or given) culture with ``content``.

        No fallback probing: the exact culture file is written. Returns
        ``content`` unchanged.
        """
        log.debug("Write resources for %s using %s", base_name, self.options.resources_root)
        path = Path(file_name(
            self.base_path(base_name),
            self._culture_for_call(culture),
            self.default_culture,
            self.extension,
        ))
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.exists():
            log.info("Deleting file %s", path)
            path.unlink()
        log.debug("Writing file %s with %d entries", path, len(content))
        formats.write_file(path, content, self.extension)
        return content

    def serialize(self, content: Mapping[str, str]) -> str:
        return formats.serialize(content, self.extension)

    def parse_file(self, path: Path) -> Dict[str, str]:
        return formats.read_file(path, self.extension)
