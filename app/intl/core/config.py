"""intl configuration settings."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FormatSettings(BaseSettings):
    """File format and built-in locale fallbacks.

    The date patterns and number separators are used only when the active
    language does not define its own `_locale.*` entries.
    """

    DEFAULT_FILE_FORMAT: str = Field(default="json", alias="INTL_DEFAULT_FILE_FORMAT")
    TRANSLATIONS_DIR: Optional[str] = Field(default=None, alias="INTL_TRANSLATIONS_DIR")

    DATE_SHORT: str = Field(default="Y-m-d", alias="INTL_DATE_SHORT")
    DATE_LONG: str = Field(default="Y-m-d H:i", alias="INTL_DATE_LONG")

    NUMBER_DECIMAL: str = Field(default=".", alias="INTL_NUMBER_DECIMAL")
    NUMBER_THOUSANDS: str = Field(default=",", alias="INTL_NUMBER_THOUSANDS")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DEFAULT_FILE_FORMAT")
    @classmethod
    def normalize_file_format(cls, value: str) -> str:
        """Store the format tag lowercased (JSON -> json)."""
        return value.strip().lower()


class Settings(BaseSettings):
    """intl configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = Field(default="INFO", alias="INTL_LOG_LEVEL")

    formats: FormatSettings

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "formats": FormatSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
