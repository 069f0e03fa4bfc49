"""Naming templates — compile a file-name template into a culture matcher."""

import re

CULTURE_TOKEN = "{CULTURE}"
ANY_TOKEN = "{ANY}"

CULTURE_PATTERN = r"([a-z]{2}-[A-Z]{2})"
ANY_PATTERN = r"(.*)"

_TOKEN_RE = re.compile(re.escape(CULTURE_TOKEN) + "|" + re.escape(ANY_TOKEN))
_CULTURE_CODE_RE = re.compile(r"^[a-z]{2}-[A-Z]{2}$")


class InvalidTemplateError(ValueError):
    """Raised when a naming template does not hold exactly one culture placeholder."""


def is_culture_code(value: str) -> bool:
    """True when *value* has the ``xx-XX`` shape, e.g. ``en-US``."""
    return bool(_CULTURE_CODE_RE.match(value))


def compile_template(template: str) -> tuple[str, int]:
    """Turn *template* into ``(regex, culture_group_index)``.

    Literal text is escaped, ``{CULTURE}`` becomes a capture group for
    ``xx-XX`` codes and every ``{ANY}`` becomes a greedy capture group. The
    group index is the 1-based rank of the culture placeholder's offset among
    the offsets of all placeholders.
    """
    culture_count = template.count(CULTURE_TOKEN)
    if culture_count == 0:
        raise InvalidTemplateError(f"Naming template {template!r} has no {CULTURE_TOKEN} placeholder")
    if culture_count > 1:
        raise InvalidTemplateError(
            f"Naming template {template!r} has {culture_count} {CULTURE_TOKEN} placeholders, expected one"
        )

    culture_offset = template.index(CULTURE_TOKEN)
    offsets = [culture_offset]
    any_offset = template.find(ANY_TOKEN)
    while any_offset != -1:
        offsets.append(any_offset)
        any_offset = template.find(ANY_TOKEN, any_offset + 1)
    offsets.sort()
    group_index = offsets.index(culture_offset) + 1

    parts = []
    position = 0
    for token in _TOKEN_RE.finditer(template):
        parts.append(re.escape(template[position : token.start()]))
        parts.append(CULTURE_PATTERN if token.group() == CULTURE_TOKEN else ANY_PATTERN)
        position = token.end()
    parts.append(re.escape(template[position:]))

    return "".join(parts), group_index


class FileNamePattern:
    """Compiled naming template that extracts culture codes from file names."""

    def __init__(self, template: str):
        self.template = template
        self.regex, self.culture_group = compile_template(template)
        self._compiled = re.compile(self.regex)

    def match(self, file_name: str) -> str | None:
        """Return the culture code carried by *file_name*, or None when it does not match."""
        match = self._compiled.fullmatch(file_name)
        if match is None or not match.groups():
            return None
        return match.group(self.culture_group)

    def __repr__(self) -> str:
        return f"FileNamePattern({self.template!r})"
