"""Configuration values for the huelog package."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from huelog.flags import STD_FLAGS
from huelog.levels import Level


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HUELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    level: Level = Field(Level.DEBUG, description="Default minimum level for new loggers")
    flags: int = Field(STD_FLAGS, ge=0, description="Default header flags for new loggers")
    color: bool = Field(True, description="Colorize prefix and tags on new loggers")

    log_level: str = Field("INFO", description="Log level for huelog's own diagnostics")

    @field_validator("level", mode="before")
    @classmethod
    def parse_level(cls, value: object) -> Level:
        return Level.parse(value)  # type: ignore[arg-type]


settings = Settings()
