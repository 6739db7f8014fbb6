from __future__ import annotations

import inspect
from typing import Any, Optional

from ..infra.resources import LocalizedStringResources
from .logging_config import get_logger
from .reader import LocalizedStringReader

log = get_logger(__name__)


def base_name_for(resource_source: Any) -> str:
    """Fully qualified name used as the base name of a type's resources.

    Classes and functions give ``module.QualName``, modules their dotted name,
    strings are returned unchanged and any other object uses its class.
    """
    if isinstance(resource_source, str):
        return resource_source
    if inspect.ismodule(resource_source):
        return resource_source.__name__
    if not (inspect.isclass(resource_source) or inspect.isroutine(resource_source)):
        resource_source = type(resource_source)
    module = getattr(resource_source, "__module__", None)
    qualname = getattr(resource_source, "__qualname__", resource_source.__name__)
    if not module or module == "builtins":
        return qualname
    return f"{module}.{qualname}"


class LocalizedStringFactory:
    """Creates a fresh reader per call from the resource store."""

    def __init__(self, resources: LocalizedStringResources) -> None:
        self.resources = resources

    def create(self, resource_source: Any, culture: Optional[str] = None) -> LocalizedStringReader:
        base_name = base_name_for(resource_source)
        log.debug("Creating reader for %s", base_name)
        strings = self.resources.read(base_name, culture=culture)
        log.debug("Reader for %s created with %d entries", base_name, len(strings))
        return LocalizedStringReader(strings)
