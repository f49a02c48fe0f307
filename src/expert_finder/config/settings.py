"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

NonEmptyStr = Annotated[str, Field(min_length=1)]
PositiveInt = Annotated[int, Field(gt=0)]
PortInt = Annotated[int, Field(gt=0, le=65_535)]
UnitIntervalFloat = Annotated[float, Field(ge=0.0, le=1.0)]


class Settings(BaseSettings):
    """Environment-driven application settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    slack_signing_secret: str | None = Field(
        default=None,
        validation_alias="SLACK_SIGNING_SECRET",
        repr=False,
    )
    port: PortInt = Field(default=3000, validation_alias="PORT")
    experts_file: NonEmptyStr = Field(default="experts.json", validation_alias="EXPERTS_FILE")
    match_threshold: UnitIntervalFloat = Field(
        default=0.4,
        validation_alias="EXPERT_MATCH_THRESHOLD",
    )
    signature_max_age_seconds: PositiveInt = Field(
        default=300,
        validation_alias="SLACK_SIGNATURE_MAX_AGE_SECONDS",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
