"""Configuration settings and data models."""

import json
import logging
import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "debate_hall.json"


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8000, description="Port to listen on")
    allowed_origins: list[str] = Field(
        default_factory=list,
        description="CORS origins; empty allows any localhost origin",
    )


class DatabaseConfig(BaseModel):
    """SQLite storage configuration."""

    path: str = Field(default="debates.db", description="SQLite database file")


class AuthConfig(BaseModel):
    """Bearer token and password hashing configuration."""

    # SECURITY: In production, jwt_secret_key MUST be set via JWT_SECRET_KEY
    jwt_secret_key: str = Field(default="dev-secret-key-change-in-production")
    jwt_algorithm: str = Field(default="HS256")
    jwt_expire_hours: int = Field(default=168, description="Token lifetime, default 7 days")
    bcrypt_rounds: int = Field(default=12)

    @field_validator("jwt_expire_hours", "bcrypt_rounds")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Must be a positive integer")
        return v


class SystemConfig(BaseModel):
    """System-wide configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")


class AppConfig(BaseModel):
    """Complete application configuration."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "AppConfig":
        """Load configuration from a JSON or YAML file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to YAML file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(),
                f,
                default_flow_style=False,
                indent=2,
            )

    def apply_env_overrides(self) -> "AppConfig":
        """Return a copy with environment variables taking precedence."""
        data = self.model_dump()

        if "DATABASE_PATH" in os.environ:
            data["database"]["path"] = os.environ["DATABASE_PATH"]
        if "JWT_SECRET_KEY" in os.environ:
            data["auth"]["jwt_secret_key"] = os.environ["JWT_SECRET_KEY"]
        if "JWT_EXPIRE_HOURS" in os.environ:
            data["auth"]["jwt_expire_hours"] = int(os.environ["JWT_EXPIRE_HOURS"])
        if "ALLOWED_ORIGINS" in os.environ:
            data["server"]["allowed_origins"] = [
                origin.strip()
                for origin in os.environ["ALLOWED_ORIGINS"].split(",")
                if origin.strip()
            ]
        if "PORT" in os.environ:
            data["server"]["port"] = int(os.environ["PORT"])
        if "LOG_LEVEL" in os.environ:
            data["system"]["log_level"] = os.environ["LOG_LEVEL"].upper()

        return AppConfig(**data)


def get_default_config() -> AppConfig:
    """Load configuration from DEBATE_HALL_CONFIG (or debate_hall.json) plus env overrides."""
    config_path = Path(os.environ.get("DEBATE_HALL_CONFIG", DEFAULT_CONFIG_PATH))

    if config_path.exists():
        config = AppConfig.load_from_file(config_path)
        logger.debug(f"Loaded configuration from {config_path}")
    else:
        config = AppConfig()

    return config.apply_env_overrides()
