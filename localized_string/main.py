from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .core.config import load_options
from .core.errors import ResourceParseError
from .core.factory import LocalizedStringFactory
from .core.logging_config import get_logger, setup_logging
from .infra.resources import LocalizedStringResources

log = get_logger(__name__)


def _parse_pairs(pairs: List[str]) -> Dict[str, str]:
    content: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {pair!r}")
        content[key] = value
    return content


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="localized-string",
        description="Inspect and write localized string resource files.",
    )
    parser.add_argument("--culture", help="culture to use instead of the ambient one")
    parser.add_argument("--path", help="resources root (overrides LOCALIZER_RESOURCES_PATH)")
    parser.add_argument("--extension", help="resource file extension, 'json' or a line format")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--log-file", type=Path, help="also log to this file")

    sub = parser.add_subparsers(dest="command", required=True)

    get = sub.add_parser("get", help="print one string, formatted with ARGS")
    get.add_argument("base_name")
    get.add_argument("key")
    get.add_argument("args", nargs="*")

    keys = sub.add_parser("keys", help="print every key of a resource")
    keys.add_argument("base_name")

    write = sub.add_parser("write", help="replace the culture file with KEY=VALUE pairs")
    write.add_argument("base_name")
    write.add_argument("pairs", nargs="+", metavar="KEY=VALUE")

    return parser


def make_resources(args: argparse.Namespace) -> LocalizedStringResources:
    overrides: Dict[str, Any] = {}
    if args.path is not None:
        overrides["RESOURCES_PATH"] = args.path
    if args.extension is not None:
        overrides["RESOURCES_EXTENSION"] = args.extension
    resources = LocalizedStringResources(load_options(**overrides))
    if args.culture:
        resources.set_culture(args.culture)
    return resources


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(debug=args.debug, log_file=args.log_file)

    try:
        resources = make_resources(args)
    except ValidationError as e:
        log.error("Invalid configuration: %s", e)
        return 2
    log.debug("Using culture %s", resources.current_culture)

    try:
        if args.command == "get":
            reader = LocalizedStringFactory(resources).create(args.base_name)
            print(reader.get_formatted(args.key, *args.args) if args.args else reader[args.key])
        elif args.command == "keys":
            reader = LocalizedStringFactory(resources).create(args.base_name)
            for key in reader.get_all_keys():
                print(key)
        elif args.command == "write":
            try:
                content = _parse_pairs(args.pairs)
            except argparse.ArgumentTypeError as e:
                parser.error(str(e))
            resources.write(args.base_name, content)
            log.info("Wrote %d entries for %s (%s)", len(content), args.base_name, resources.current_culture)
    except ResourceParseError as e:
        log.error("%s", e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
