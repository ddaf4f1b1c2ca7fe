"""Flag defaults loaded from environment variables."""

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from jwt_kit.core.errors import ConfigurationError

SUBJECT_DEFAULT = "glooey@solo.io"
AUDIENCE_DEFAULT = "https://fake-resource.solo.io"
EXPIRES_IN_DEFAULT = "8766h"
LOG_LEVEL_DEFAULT = "WARNING"


class KitSettings(BaseSettings):
    """Defaults for the jwt-kit command line."""

    model_config = SettingsConfigDict(env_prefix="JWT_KIT_")

    subject: str = SUBJECT_DEFAULT
    audiences: list[str] = Field(default_factory=lambda: [AUDIENCE_DEFAULT])
    expires_in: str = EXPIRES_IN_DEFAULT
    log_level: str = LOG_LEVEL_DEFAULT


def load_settings() -> KitSettings:
    """Load settings, reporting malformed environment values as ConfigurationError."""
    try:
        return KitSettings()
    except (SettingsError, ValidationError) as exc:
        raise ConfigurationError(f"invalid environment settings: {exc}") from exc
