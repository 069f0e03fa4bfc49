from langres.models.catalog import Catalog
from langres.models.culture import CultureDescriptor, LanguageChangedEvent

__all__ = [
    "Catalog",
    "CultureDescriptor",
    "LanguageChangedEvent",
]
