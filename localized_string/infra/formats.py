from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import Dict, Mapping

from ..core.errors import ResourceParseError

JSON_EXTENSION = "json"

# only \r\n, \r and \n end a line; other Unicode separators stay in values
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def is_json(extension: str) -> bool:
    return extension == JSON_EXTENSION


def serialize(content: Mapping[str, str], extension: str) -> str:
    """Render ``content`` in the format selected by ``extension``.

    Anything other than ``json`` is the ``key=value`` line format. Values
    containing line breaks are written as is and will not read back intact.
    """
    if is_json(extension):
        return json.dumps(dict(content), ensure_ascii=False, indent=2)
    return os.linesep.join(f"{key}={value}" for key, value in content.items())


def parse(text: str, extension: str, source: str | Path = "<string>") -> Dict[str, str]:
    if is_json(extension):
        return _parse_json(text, source)
    return _parse_lines(text)


def _parse_json(text: str, source: str | Path) -> Dict[str, str]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ResourceParseError(source, str(exc)) from exc
    if not isinstance(data, dict):
        raise ResourceParseError(source, f"expected a JSON object, got {type(data).__name__}")
    for key, value in data.items():
        if not isinstance(value, str):
            raise ResourceParseError(source, f"value of {key!r} is not a string")
    return data


def _parse_lines(text: str) -> Dict[str, str]:
    strings: Dict[str, str] = {}
    for line in _LINE_BREAK.split(text):
        key, sep, value = line.partition("=")
        if not sep:
            continue
        strings[key] = value
    return strings


def read_file(path: Path, extension: str) -> Dict[str, str]:
    # utf-8-sig: files saved by Windows editors often start with a BOM
    text = path.read_text(encoding="utf-8-sig")
    return parse(text, extension, source=path)


def write_file(path: Path, content: Mapping[str, str], extension: str) -> None:
    # newline="" keeps os.linesep from being translated a second time
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(serialize(content, extension))
