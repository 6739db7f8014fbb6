from __future__ import annotations

import locale
import logging
import os
from typing import Sequence

log = logging.getLogger(__name__)

_AMBIENT_ENV_KEYS = ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE")
_NEUTRAL_LOCALES = {"c", "posix"}


def primary_subtag(culture: str) -> str:
    """``en-US`` -> ``en``; a bare language tag is returned as is."""
    return culture.split("-", 1)[0]


def validate_culture(requested: str | None, supported: Sequence[str], default: str) -> str:
    """Map ``requested`` onto a supported culture, falling back to ``default``.

    An exact match wins. Otherwise the first supported entry sharing the
    primary subtag is used (``en-GB`` -> ``en-US``). Never raises.
    """
    if not requested:
        return default
    if requested in supported:
        return requested
    wanted = primary_subtag(requested)
    for culture in supported:
        if primary_subtag(culture) == wanted:
            return culture
    return default


def _from_hint(value: str | None) -> str:
    raw = (value or "").strip()
    if not raw:
        return ""
    # LANGUAGE may hold a priority list: "fr_FR:en"
    raw = raw.split(":", 1)[0]
    raw = raw.split(".", 1)[0].split("@", 1)[0]
    if raw.lower() in _NEUTRAL_LOCALES:
        return ""
    return raw.replace("_", "-")


def detect_ambient_culture() -> str:
    """Best-effort culture of the running process, ``""`` when unknown."""
    try:
        detected = _from_hint(locale.getlocale()[0])
    except ValueError:
        detected = ""
    if detected:
        return detected

    for key in _AMBIENT_ENV_KEYS:
        detected = _from_hint(os.environ.get(key))
        if detected:
            log.debug("Ambient culture %s taken from %s", detected, key)
            return detected

    return ""
