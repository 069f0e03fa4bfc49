"""Culture descriptors and the language-changed payload."""

from pydantic import BaseModel, ConfigDict


class CultureDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    display_name: str = ""

    def __str__(self) -> str:
        return self.code


class LanguageChangedEvent(BaseModel):
    """Previous and new culture of a successful switch.

    ``old_culture`` is ``None`` for the first switch after setup.
    """

    model_config = ConfigDict(frozen=True)

    old_culture: CultureDescriptor | None = None
    new_culture: CultureDescriptor
