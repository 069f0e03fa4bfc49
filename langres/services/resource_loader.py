"""Resource loader — parse ``key=value`` resource files.

Format, one entry per line::

    Greeting=Hello, {0}!
    a\\=b=first line\\nsecond line

The first ``=`` not preceded by a backslash separates key from value.
``\\=`` stands for a literal ``=`` in both key and value, and ``\\n`` for a
newline in the value. Lines without a separator are ignored.
"""

import logging
import re
from collections.abc import Iterable

_log = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"(?<!\\)=")

DEFAULT_ENCODING = "utf-8-sig"


def parse_line(line: str) -> tuple[str, str] | None:
    """Split one line into ``(key, value)``, or None when it holds no entry."""
    parts = _SEPARATOR_RE.split(line, maxsplit=1)
    if len(parts) != 2:
        return None
    key = parts[0].strip().replace("\\=", "=")
    value = parts[1].strip().replace("\\=", "=").replace("\\n", "\n")
    return key, value


def load(
    file_path: str,
    into: dict[str, str] | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> dict[str, str]:
    """Merge the entries of *file_path* into *into* (a new dict when omitted).

    Later entries override earlier ones. A file that cannot be read counts as
    empty; the problem is logged and the mapping is returned unchanged.
    """
    resources = {} if into is None else into
    try:
        with open(file_path, encoding=encoding) as f:
            lines = [line.rstrip("\n") for line in f]
    except (OSError, UnicodeDecodeError) as exc:
        _log.warning("Skipping unreadable resource file %s: %s", file_path, exc)
        return resources

    for line in lines:
        entry = parse_line(line)
        if entry is not None:
            key, value = entry
            resources[key] = value
    _log.debug("Loaded %s", file_path)
    return resources


def load_files(file_paths: Iterable[str], encoding: str = DEFAULT_ENCODING) -> dict[str, str]:
    """Build a fresh mapping from *file_paths*, in order (last file wins)."""
    resources: dict[str, str] = {}
    for path in file_paths:
        load(path, resources, encoding=encoding)
    return resources
