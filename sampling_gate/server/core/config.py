"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="Sampling gate server host address to bind to",
        alias="SAMPLING_GATE_SERVER_HOST",
    )
    server_port: int = Field(
        default=8000,
        description="Sampling gate server port number",
        alias="SAMPLING_GATE_SERVER_PORT",
    )
    secret_key: Optional[SecretStr] = Field(
        default=None,
        description="Shared secret expected in the X-Secret-Key header; unset disables the check",
        alias="SAMPLING_GATE_SECRET_KEY",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="SAMPLING_GATE_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="SAMPLING_GATE_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="SAMPLING_GATE_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Write DEBUG logs to a file in addition to the console",
        alias="SAMPLING_GATE_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Model Provider Configuration
    # =====================================================================
    model: Optional[str] = Field(
        default=None,
        description="Default Pydantic AI model ('provider:model') for agents registered by the server",
        alias="SAMPLING_GATE_MODEL",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
