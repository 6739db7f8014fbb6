"""Localized string resources loaded from per-culture files.

Typical wiring::

    options = load_options(RESOURCES_PATH="Resources", SUPPORTED_CULTURES=["en-US", "fr-FR"])
    resources = LocalizedStringResources(options)
    factory = LocalizedStringFactory(resources)
    strings = factory.create("Greetings")
    strings.get_formatted("hello", "Ana")
"""

from __future__ import annotations

from .core.config import LocalizerOptions, load_options
from .core.culture import detect_ambient_culture, primary_subtag, validate_culture
from .core.errors import LocalizationError, ResourceParseError
from .core.factory import LocalizedStringFactory, base_name_for
from .core.reader import LocalizedStringReader
from .infra.resources import LocalizedStringResources, file_name, resolve_existing_file

__all__ = [
    "LocalizationError",
    "LocalizedStringFactory",
    "LocalizedStringReader",
    "LocalizedStringResources",
    "LocalizerOptions",
    "ResourceParseError",
    "base_name_for",
    "detect_ambient_culture",
    "file_name",
    "load_options",
    "primary_subtag",
    "resolve_existing_file",
    "validate_culture",
]
