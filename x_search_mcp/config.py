"""
X Search MCP Server - Configuration

Pydantic Settings for all configuration via environment variables.
Settings are loaded once per process and are immutable afterwards.
"""

from functools import lru_cache
from typing import Optional, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from x_search_mcp.exceptions import ConfigurationError


DEFAULT_BASE_URL = "https://api.x.ai/v1"
DEFAULT_MODEL = "grok-4-1-fast"
DEFAULT_TIMEOUT_MS = 30000


class XAISettings(BaseSettings):
    """xAI Responses API configuration."""
    api_key: Optional[str] = Field(None, alias="XAI_API_KEY")
    base_url: str = Field(DEFAULT_BASE_URL, alias="XAI_BASE_URL")
    model: str = Field(DEFAULT_MODEL, alias="XAI_MODEL")
    timeout_ms: int = Field(DEFAULT_TIMEOUT_MS, alias="XAI_TIMEOUT", gt=0)

    model_config = {"env_prefix": "", "extra": "ignore", "frozen": True}

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    def require_api_key(self) -> str:
        """Return the API key or raise if it is missing or blank."""
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError("XAI_API_KEY is required")
        return self.api_key


class MCPSettings(BaseSettings):
    """MCP server configuration."""
    transport: Literal["stdio", "sse", "http"] = Field("stdio", alias="MCP_TRANSPORT")
    port: int = Field(8080, alias="MCP_PORT")
    host: str = Field("127.0.0.1", alias="MCP_HOST")

    model_config = {"env_prefix": "", "extra": "ignore", "frozen": True}


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", alias="LOG_LEVEL"
    )
    format: Literal["json", "text"] = Field("text", alias="LOG_FORMAT")

    model_config = {"env_prefix": "", "extra": "ignore", "frozen": True}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    xai: XAISettings = Field(default_factory=XAISettings)
    mcp: MCPSettings = Field(default_factory=MCPSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore", "frozen": True}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables (once per process)."""
    from dotenv import load_dotenv
    load_dotenv()
    return Settings()
