"""Host environment locale detection."""

import locale as pylocale
import os

from langres.services.naming import is_culture_code

_ENV_KEYS = ("LC_ALL", "LC_MESSAGES", "LANG")


def normalize_culture_code(raw: str | None) -> str | None:
    """Turn ``en_US.UTF-8``-style identifiers into ``en-US``; None if not possible."""
    value = (raw or "").strip()
    if not value:
        return None
    value = value.split(".", 1)[0].split("@", 1)[0].replace("_", "-")
    parts = value.split("-")
    if len(parts) < 2:
        return None
    code = f"{parts[0].lower()}-{parts[1].upper()}"
    return code if is_culture_code(code) else None


def detect_system_culture() -> str | None:
    """Culture code of the host environment, or None when it cannot be determined."""
    try:
        code = normalize_culture_code(pylocale.getlocale()[0])
    except ValueError:
        code = None
    if code:
        return code

    for key in _ENV_KEYS:
        code = normalize_culture_code(os.environ.get(key))
        if code:
            return code
    return None
