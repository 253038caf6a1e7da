"""Application configuration using Pydantic Settings.

Environment variables are automatically mapped to Settings fields.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from micrometa.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field has a default, so an empty environment yields a usable
    configuration; invalid values still fail early with validation errors.
    """

    # --- Diagnostics ---
    micrometa_debug: bool = False

    # --- Microformats2 parsing ---
    # BeautifulSoup tree builder handed to mf2py ("html.parser", "lxml", "html5lib")
    mf2_html_parser: str = "html.parser"
    # HTML-encode non e-* property values by default
    mf2_convert_classic: bool = True

    # --- Document fetching (CLI) ---
    fetch_timeout: float = 10.0
    fetch_user_agent: str = f"micrometa/{__version__}"

    @model_validator(mode="after")
    def validate_fetch_config(self) -> "Settings":
        """Validate fetch configuration.

        Raises:
            ValueError: If the fetch timeout is not positive

        """
        if self.fetch_timeout <= 0:
            msg = "FETCH_TIMEOUT must be greater than zero"
            raise ValueError(msg)
        return self

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance.

    Uses lru_cache to ensure the .env file is only parsed once
    and all modules share the same settings instance.

    Returns:
        Settings instance with application configuration.

    Raises:
        ValidationError: If an environment variable holds an invalid value.

    """
    return Settings()


settings = get_settings()
