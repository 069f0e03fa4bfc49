"""
Inspect a resource directory from the command line.

Usage:
    langres cultures ./i18n
    langres show ./i18n --culture fr-FR
    langres show ./i18n --culture fr-FR --key Format --format Ada
"""

import argparse
import logging
import sys

from langres.services.catalog_service import DirectoryNotFoundError
from langres.services.naming import InvalidTemplateError
from langres.services.resource_manager import ResourceManager

log = logging.getLogger("langres")


# ---------------------------------------------------------------------------
# CLI arguments
# ---------------------------------------------------------------------------

def parse_args(argv=None):
    from langres.config import settings

    p = argparse.ArgumentParser(prog="langres", description="Inspect localization resource files")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    cultures = sub.add_parser("cultures", help="List the cultures found in a directory")
    cultures.add_argument("directory")
    cultures.add_argument("--template", default=settings.naming_template)

    show = sub.add_parser("show", help="Print the strings of one culture")
    show.add_argument("directory")
    show.add_argument("--template", default=settings.naming_template)
    show.add_argument("--culture", required=True, help="Culture code, e.g. en-US")
    show.add_argument("--key", action="append", dest="keys", metavar="KEY", help="Only print this key (repeatable)")
    show.add_argument("--format", nargs="+", dest="format_args", metavar="ARG",
                      help="Format each key with these positional arguments")

    return p.parse_args(argv)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_cultures(manager: ResourceManager, args) -> int:
    for culture in manager.cultures:
        print(f"{culture.code}\t{culture.display_name}")
    return 0


def cmd_show(manager: ResourceManager, args) -> int:
    if not manager.set_current_culture(args.culture):
        print(f"Unknown culture: {args.culture}", file=sys.stderr)
        return 1

    keys = args.keys or sorted(manager.resources)
    for key in keys:
        if args.format_args:
            value = manager.get_formatted(key, *args.format_args)
        else:
            value = manager.get(key)
        print(f"{key}={value}")
    return 0


COMMANDS = {
    "cultures": cmd_cultures,
    "show": cmd_show,
}


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    manager = ResourceManager()
    try:
        manager.set_up(args.directory, args.template)
    except (InvalidTemplateError, DirectoryNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    log.debug("Running %s on %s", args.command, args.directory)
    return COMMANDS[args.command](manager, args)


if __name__ == "__main__":
    sys.exit(main())
