# The module is to define the configuration settings for the UseKeen MCP server.
# Date: 2026-10-19
# Version: 0.1.0

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache
from usekeen_mcp.core.exceptions import StartupError

SERVER_NAME = "UseKeen Documentation MCP Server"
SERVER_VERSION = "1.2.3"

DEFAULT_BASE_URL = "https://usekeen-api-283956349806.us-central1.run.app"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class Settings(BaseSettings):
    """
    The Settings class is used to define the configuration settings for the server.
    It inherits from BaseSettings, which allows it to load environment variables
    (and an optional .env file) with type validation.
    Attributes:
        USEKEEN_API_KEY (str): API key for the UseKeen API. Required.
        USEKEEN_API_BASE_URL (str): Base URL of the UseKeen API.
        USEKEEN_API_TIMEOUT (float): Timeout in seconds for each UseKeen API request.
        LOG_LEVEL (str): Level of the stderr diagnostic log.
    """
    # USEKEEN_API
    USEKEEN_API_KEY: str = Field(..., min_length=1)
    USEKEEN_API_BASE_URL: str = DEFAULT_BASE_URL
    USEKEEN_API_TIMEOUT: float = Field(default=60.0, gt=0)

    # LOGGING
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(_LOG_LEVELS)}")
        return level

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = "ignore"

# lru_cache to cache the settings instance.
@lru_cache
def get_settings():
    return Settings()


def load_settings() -> Settings:
    """
    Loads the settings for startup, translating configuration problems into a StartupError.
    """
    try:
        return get_settings()
    except ValidationError as e:
        fields = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
        if "USEKEEN_API_KEY" in fields:
            raise StartupError("Please set USEKEEN_API_KEY environment variable") from e
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise StartupError(f"Invalid configuration: {details}") from e
