import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from langres.services.naming import CULTURE_TOKEN


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LANGRES_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Resources
    resource_dir: str = "./i18n"
    naming_template: str = "language-resource-{CULTURE}.{ANY}.i18n"
    file_encoding: str = "utf-8-sig"

    # Culture code, or "system" for the host environment locale
    default_culture: str | None = None


settings = Settings()

_log = logging.getLogger(__name__)
if CULTURE_TOKEN not in settings.naming_template:
    _log.warning(
        "LANGRES_NAMING_TEMPLATE %r has no %s placeholder; setup will fail",
        settings.naming_template,
        CULTURE_TOKEN,
    )
