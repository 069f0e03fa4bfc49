from langres.hooks import LANGUAGE_CHANGED, RESOURCES_CHANGED
from langres.models import Catalog, CultureDescriptor, LanguageChangedEvent
from langres.services.catalog_service import DirectoryNotFoundError
from langres.services.naming import InvalidTemplateError
from langres.services.resource_manager import (
    NOT_FOUND,
    SYSTEM_LOCALE,
    ActiveResources,
    CultureNotFoundError,
    ResourceManager,
)

__all__ = [
    "ActiveResources",
    "Catalog",
    "CultureDescriptor",
    "CultureNotFoundError",
    "DirectoryNotFoundError",
    "InvalidTemplateError",
    "LANGUAGE_CHANGED",
    "LanguageChangedEvent",
    "NOT_FOUND",
    "RESOURCES_CHANGED",
    "ResourceManager",
    "SYSTEM_LOCALE",
]
