"""Catalog service — scan a resource directory and index files by culture."""

import logging
import os

from babel import Locale, UnknownLocaleError

from langres.models.catalog import Catalog
from langres.models.culture import CultureDescriptor
from langres.services.naming import FileNamePattern

_log = logging.getLogger(__name__)


class DirectoryNotFoundError(FileNotFoundError):
    """Raised when the resource directory is missing or cannot be listed."""


def native_display_name(code: str) -> str:
    """Native name of a culture code, e.g. ``fr-FR`` -> ``français (France)``.

    Falls back to the code itself for locales babel does not know.
    """
    try:
        locale = Locale.parse(code, sep="-")
    except (UnknownLocaleError, ValueError):
        _log.warning("No locale data for culture %s, using the code as its name", code)
        return code
    return locale.display_name or code


class CatalogService:
    @staticmethod
    def list_files(directory: str) -> list[str]:
        """Return the file names directly inside *directory*, sorted by name."""
        if not os.path.isdir(directory):
            raise DirectoryNotFoundError(f"Resource directory not found: {directory}")
        try:
            entries = os.listdir(directory)
        except OSError as exc:
            raise DirectoryNotFoundError(f"Resource directory cannot be listed: {directory}") from exc
        return sorted(name for name in entries if os.path.isfile(os.path.join(directory, name)))

    @staticmethod
    def build(directory: str, template: str | FileNamePattern) -> Catalog:
        """Scan *directory* once and group matching files by culture code.

        Files that do not match the template are skipped. Cultures keep their
        first-discovery order; each culture's files keep listing order.
        """
        pattern = template if isinstance(template, FileNamePattern) else FileNamePattern(template)

        cultures: list[CultureDescriptor] = []
        files_by_culture: dict[str, list[str]] = {}
        for file_name in CatalogService.list_files(directory):
            code = pattern.match(file_name)
            if code is None:
                continue
            if code not in files_by_culture:
                files_by_culture[code] = []
                cultures.append(CultureDescriptor(code=code, display_name=native_display_name(code)))
            path = os.path.join(directory, file_name)
            files_by_culture[code].append(path)
            _log.debug("Matched %s for culture %s", path, code)

        catalog = Catalog(
            cultures=tuple(cultures),
            files_by_culture={code: tuple(paths) for code, paths in files_by_culture.items()},
        )
        _log.info("Built catalog from %s: %d culture(s)", directory, len(catalog))
        return catalog
