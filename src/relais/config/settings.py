"""
Application settings with environment-based configuration.

Priority (highest to lowest):
1. Environment variables (from .env or system)
2. Environment-specific YAML config file (development.yaml, production.yaml)
3. Default YAML config file (default.yaml)
4. Pydantic defaults
"""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Secrets (database credentials, RPC keys embedded in URLs) should come
    from environment variables, not from YAML files.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Application
    APP_NAME: str = "Relais"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="development", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # API Server
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000, ge=1024, le=65535)
    API_RELOAD: bool = Field(default=False)

    # CORS Configuration
    CORS_ORIGINS: List[str] = Field(
        default=[
            "http://localhost:3000",
        ],
        description="Allowed CORS origins",
    )

    # Database (from environment - REQUIRED)
    DATABASE_URL: str = Field(..., description="Database connection URL")
    DATABASE_ECHO: bool = Field(default=False)

    # Chain node (from environment - REQUIRED)
    RPC_ENDPOINT: str = Field(..., description="Chain node JSON-RPC URL")
    RPC_TIMEOUT: float = Field(
        default=15.0,
        gt=0,
        description="Chain RPC request timeout in seconds",
    )

    # Eligibility
    MIN_TOKEN_BALANCE: int = Field(
        default=0,
        ge=0,
        description="Minimum token balance / voting power (base units)",
    )
    VOTING_SAFETY_MARGIN_BLOCKS: int = Field(
        default=2400,
        ge=0,
        description="Blocks reserved before proposal end for relaying",
    )
    VOTING_POWER_WHITELIST: List[str] = Field(
        default=[
            "0x5b3bffc0bcf8d4caec873fdcf719f60725767c98",
            "0x2b384212edc04ae8bb41738d05ba20e33277bf33",
        ],
        description="Addresses exempt from the minimum voting power rule",
    )

    # Governance contracts / EIP-712 domains
    CHAIN_ID: int = Field(default=1, ge=1)
    GOVERNOR_ADDRESS: str = Field(
        default="0x7E9B1672616FF6D6629Ef2879419aaE79A9018D2",
    )
    GOVERNOR_DOMAIN_NAME: str = Field(default="dYdX Governance")
    TOKEN_ADDRESS: str = Field(
        default="0x92D6C1e31e14520e676a687F0a93788B716BEff5",
    )
    TOKEN_DOMAIN_NAME: str = Field(default="dYdX")
    TOKEN_DOMAIN_VERSION: str = Field(default="1")

    # Notifications
    NOTIFICATION_WEBHOOK: Optional[str] = Field(
        default=None,
        description="Webhook URL prefix; the message is appended to it",
    )
    NOTIFICATION_TIMEOUT: float = Field(default=5.0, gt=0)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Observability - Metrics
    METRICS_ENABLED: bool = Field(
        default=True,
        description="Expose Prometheus metrics on /metrics",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"Invalid LOG_LEVEL. Must be one of: {allowed}")
        return v_upper

    @field_validator("VOTING_POWER_WHITELIST")
    @classmethod
    def normalize_whitelist(cls, v: List[str]) -> List[str]:
        """Store exempt addresses lowercased."""
        return [address.strip().lower() for address in v if address.strip()]

    @field_validator("NOTIFICATION_WEBHOOK")
    @classmethod
    def empty_webhook_is_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty webhook value as not configured."""
        if v is not None and not v.strip():
            return None
        return v


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> Settings:
    """
    Load configuration from YAML files and environment variables.

    Priority: ENV vars > environment-specific YAML > default YAML > defaults

    Args:
        config_file: Optional YAML config filename override
        env_file: Optional .env filename (e.g., ".env.development")
        env: Optional environment name override (e.g., "development", "test")

    Returns:
        Settings instance

    Raises:
        ValidationError: If required fields are missing
    """
    current_file = Path(__file__).resolve()
    project_root = current_file.parent.parent.parent.parent
    config_dir = project_root / "config"

    environment = env or os.getenv("ENV", "production")

    env_map = {
        "production": (".env.production", "production.yaml"),
        "development": (".env.development", "development.yaml"),
        "test": (".env.test", "test.yaml"),
    }

    if env_file is None:
        default_env_file, default_config_file = env_map.get(
            environment, (".env.production", "production.yaml")
        )
        env_file = default_env_file
        if config_file is None:
            config_file = default_config_file

    env_file_path = project_root / env_file
    if env_file_path.exists():
        load_dotenv(env_file_path, override=True)

    default_config_path = config_dir / "default.yaml"
    merged_config = {}

    if default_config_path.exists():
        with open(default_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config = loaded

    if config_file:
        env_config_path = config_dir / config_file
        if env_config_path.exists():
            with open(env_config_path, "r") as f:
                loaded = yaml.safe_load(f)
                if loaded:
                    merged_config.update(loaded)

    # Environment variables win over YAML values
    for key in list(merged_config):
        if key in os.environ:
            merged_config.pop(key)

    return Settings(**merged_config)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or initialize global settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Override global settings (for testing)."""
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to force re-initialization (for testing)."""
    global _settings
    _settings = None
