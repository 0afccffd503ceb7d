from functools import lru_cache

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from a .env file if present as early as possible
load_dotenv()

# Port of the API stub
API_PORT = 4000


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore any other env vars we don't model explicitly
    )

    # Bind address shared by both servers
    host: str = "0.0.0.0"  # `HOST`

    # Landing page server
    web_port: int = 3000  # `WEB_PORT`

    # Passed through to uvicorn
    log_level: str = "info"  # `LOG_LEVEL`


@lru_cache(maxsize=1)
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance to avoid re-parsing env vars."""

    return Settings()
