"""
Configuration management for the resource curator

Loads settings from:
1. config/config.yaml (optional)
2. Environment variables (CURATOR_*, .env)
3. Default values
"""

from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Load environment variables
load_dotenv()


class CuratorConfig(BaseSettings):
    """Curator configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="CURATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Verification cache ---
    cache_ttl_seconds: float = Field(default=24 * 60 * 60, ge=0)

    # --- Batch verification ---
    batch_width: int = Field(default=5, ge=1)
    batch_delay_seconds: float = Field(default=0.1, ge=0)

    # --- Link probing ---
    probe_timeout_seconds: float = Field(default=5.0, gt=0)
    always_probe: bool = False
    user_agent: str = "resource-curator/0.1.0"

    # --- Selection ---
    min_results: int = Field(default=6, ge=0)
    max_results: int = Field(default=8, ge=1)
    per_topic_limit: int = Field(default=3, ge=1)

    # --- API Settings ---
    api_host: str = "127.0.0.1"
    api_port: int = Field(default=8000, ge=1, le=65535)
    api_key: str = Field(default="")
    demo_mode: bool = False
    cors_origins: str = "http://localhost:5173"  # Comma-separated string
    curate_rate_limit: int = Field(default=20, ge=1)  # per minute
    browse_rate_limit: int = Field(default=60, ge=1)  # per minute

    # --- Logging ---
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @classmethod
    def from_yaml(cls, yaml_path: str | Path = "config/config.yaml") -> "CuratorConfig":
        """Load configuration from YAML file, letting env vars fill the rest"""
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            return cls()

        with open(yaml_path) as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data)


# Global configuration instance
_config: Optional[CuratorConfig] = None


def get_config() -> CuratorConfig:
    """Get or create global configuration instance"""
    global _config
    if _config is None:
        _config = CuratorConfig.from_yaml()
    return _config


def reload_config(yaml_path: Optional[str | Path] = None) -> CuratorConfig:
    """Reload configuration from file"""
    global _config
    _config = CuratorConfig.from_yaml(yaml_path) if yaml_path else CuratorConfig.from_yaml()
    return _config
