"""Catalog — cultures discovered in a resource directory and their files."""

from pydantic import BaseModel, ConfigDict

from langres.models.culture import CultureDescriptor


class Catalog(BaseModel):
    """Result of one directory scan.

    ``cultures`` keeps first-discovery order and ``files_by_culture`` keeps
    directory-listing order per culture, which is also the load order.
    """

    model_config = ConfigDict(frozen=True)

    cultures: tuple[CultureDescriptor, ...] = ()
    files_by_culture: dict[str, tuple[str, ...]] = {}

    def get(self, code: str) -> CultureDescriptor | None:
        for culture in self.cultures:
            if culture.code == code:
                return culture
        return None

    def files_for(self, code: str) -> tuple[str, ...]:
        return self.files_by_culture.get(code, ())

    @property
    def codes(self) -> list[str]:
        return [c.code for c in self.cultures]

    @property
    def display_names(self) -> list[str]:
        return [c.display_name for c in self.cultures]

    def __contains__(self, code: object) -> bool:
        return code in self.files_by_culture

    def __len__(self) -> int:
        return len(self.cultures)
