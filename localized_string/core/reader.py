from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Mapping

log = logging.getLogger(__name__)


class LocalizedStringReader:
    """Lookups over one resolved string map.

    A missing key is never an error: the key itself is returned so untranslated
    text stays visible.
    """

    def __init__(self, strings: Mapping[str, str] | None = None) -> None:
        self._strings: Dict[str, str] = dict(strings or {})

    def __getitem__(self, key: str) -> str:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._strings

    def __len__(self) -> int:
        return len(self._strings)

    def get(self, key: str) -> str:
        value = self._strings.get(key)
        if value is None:
            log.debug("No translation for %s", key)
            return key
        return value

    def get_formatted(self, key: str, *arguments: Any) -> str:
        """Fill ``{0}``, ``{1}``... of the value of ``key`` with ``arguments``.

        Formatting errors (e.g. ``IndexError`` for a missing argument) propagate.
        A missing key returns the key unformatted.
        """
        template = self._strings.get(key)
        if template is None:
            log.debug("No translation for %s", key)
            return key
        return template.format(*arguments)

    def get_all_keys(self, include_parent_cultures: bool = False) -> Iterator[str]:
        # include_parent_cultures is accepted for API compatibility only;
        # parent culture files are not merged in.
        yield from self._strings
