"""Resource manager — active culture, loaded strings and change notifications."""

import logging
import threading
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import NamedTuple

from langres.hooks import LANGUAGE_CHANGED, RESOURCES_CHANGED, HookRegistry
from langres.models.catalog import Catalog
from langres.models.culture import CultureDescriptor, LanguageChangedEvent
from langres.services.catalog_service import CatalogService
from langres.services.resource_loader import DEFAULT_ENCODING, load_files
from langres.services.system_locale import detect_system_culture

_log = logging.getLogger(__name__)

NOT_FOUND = "NOT FOUND"
SYSTEM_LOCALE = "system"

CultureRef = str | CultureDescriptor


class ActiveResources(NamedTuple):
    """Current culture and the strings loaded for it, replaced as one value."""

    culture: CultureDescriptor | None
    resources: Mapping[str, str]


_EMPTY = ActiveResources(None, MappingProxyType({}))


class CultureNotFoundError(ValueError):
    """Raised when a culture reference does not name a culture in the catalog."""


class ResourceManager:
    """Catalog of per-culture resource files with one active culture.

    ``set_up`` scans a directory, ``set_current_culture`` and
    ``set_default_culture`` switch the active culture, ``get`` and
    ``get_formatted`` look strings up. Every successful switch loads a new
    mapping, swaps it in with a single assignment and then emits
    ``resources.changed`` followed by ``language.changed``.
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        self._encoding = encoding
        self._lock = threading.RLock()
        self._hooks = HookRegistry()
        self._catalog = Catalog()
        self._default_culture: CultureDescriptor | None = None
        self._active = _EMPTY

    @classmethod
    def from_settings(cls, config=None) -> "ResourceManager":
        """Build a manager from :class:`langres.config.Settings` and run setup."""
        if config is None:
            from langres.config import settings as config

        manager = cls(encoding=config.file_encoding)
        manager.set_up(config.resource_dir, config.naming_template)
        if config.default_culture:
            manager.set_default_culture(config.default_culture)
        return manager

    # -- setup ----------------------------------------------------------------

    def set_up(self, directory: str, template: str) -> Catalog:
        """Scan *directory* for files named after *template* and reset state.

        Raises InvalidTemplateError or DirectoryNotFoundError; the previous
        catalog stays in place when either is raised.
        """
        catalog = CatalogService.build(directory, template)
        with self._lock:
            self._catalog = catalog
            self._default_culture = None
            self._active = _EMPTY
        return catalog

    # -- queries --------------------------------------------------------------

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def cultures(self) -> list[CultureDescriptor]:
        return list(self._catalog.cultures)

    @property
    def culture_codes(self) -> list[str]:
        return self._catalog.codes

    @property
    def culture_names(self) -> list[str]:
        return self._catalog.display_names

    @property
    def current_culture(self) -> CultureDescriptor | None:
        return self._active.culture

    @property
    def default_culture(self) -> CultureDescriptor | None:
        return self._default_culture

    @property
    def resources(self) -> Mapping[str, str]:
        """Read-only view of the strings loaded for the current culture."""
        return self._active.resources

    @property
    def active(self) -> ActiveResources:
        """Current culture together with its strings, read in one step."""
        return self._active

    def get(self, key: str) -> str:
        """Return the string for *key*, or ``NOT_FOUND`` when it is not loaded."""
        return self._active.resources.get(key, NOT_FOUND)

    def get_formatted(self, key: str, *args) -> str:
        """Look up *key* and substitute ``{0}``, ``{1}``... with *args*.

        A template that does not fit *args* is returned unformatted.
        """
        text = self.get(key)
        try:
            return text.format(*args)
        except (IndexError, KeyError, ValueError, AttributeError, TypeError):
            _log.debug("Could not format %r with %d argument(s)", key, len(args))
            return text

    def __getitem__(self, key: str) -> str:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._active.resources

    # -- switching ------------------------------------------------------------

    def resolve_culture(self, ref: CultureRef) -> CultureDescriptor:
        """Find the catalog culture for a code, a descriptor or ``SYSTEM_LOCALE``."""
        if isinstance(ref, CultureDescriptor):
            code = ref.code
        elif ref == SYSTEM_LOCALE:
            code = detect_system_culture()
            if code is None:
                raise CultureNotFoundError("Host environment locale cannot be determined")
        else:
            code = ref
        culture = self._catalog.get(code)
        if culture is None:
            raise CultureNotFoundError(f"Culture {code!r} is not in the catalog")
        return culture

    def set_current_culture(self, ref: CultureRef) -> bool:
        """Switch to *ref*, falling back to the default culture when it is unknown.

        Returns False and leaves state untouched when neither resolves.
        """
        with self._lock:
            try:
                culture = self.resolve_culture(ref)
            except CultureNotFoundError as exc:
                if self._default_culture is None:
                    _log.warning("Cannot switch culture: %s", exc)
                    return False
                _log.warning("%s; falling back to %s", exc, self._default_culture.code)
                culture = self._default_culture
            self._switch_to(culture)
            return True

    def set_default_culture(self, ref: CultureRef) -> bool:
        """Remember *ref* as fallback culture; also switch to it if none is active."""
        with self._lock:
            try:
                culture = self.resolve_culture(ref)
            except CultureNotFoundError as exc:
                _log.warning("Cannot set default culture: %s", exc)
                return False
            self._default_culture = culture
            if self._active.culture is None:
                self._switch_to(culture)
            return True

    def _switch_to(self, culture: CultureDescriptor) -> None:
        resources = load_files(self._catalog.files_for(culture.code), encoding=self._encoding)
        old_culture = self._active.culture
        self._active = ActiveResources(culture, MappingProxyType(resources))
        _log.info(
            "Switched culture %s -> %s (%d key(s))",
            old_culture.code if old_culture else None,
            culture.code,
            len(resources),
        )
        self._hooks.emit(RESOURCES_CHANGED)
        self._hooks.emit(
            LANGUAGE_CHANGED,
            event=LanguageChangedEvent(old_culture=old_culture, new_culture=culture),
        )

    # -- notifications --------------------------------------------------------

    def subscribe(self, event: str, handler: Callable) -> int:
        return self._hooks.on(event, handler)

    def unsubscribe(self, token: int) -> bool:
        return self._hooks.off(token)

    def on_resources_changed(self, handler: Callable[[], None]) -> int:
        """Call *handler()* after every successful switch."""
        return self._hooks.on(RESOURCES_CHANGED, lambda: handler())

    def on_language_changed(self, handler: Callable[[LanguageChangedEvent], None]) -> int:
        """Call *handler(event)* after every successful switch, once resources changed fired."""
        return self._hooks.on(LANGUAGE_CHANGED, lambda event: handler(event))
