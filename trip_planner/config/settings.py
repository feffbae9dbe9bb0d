"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from typing import Optional, Dict, Any, List
from enum import Enum


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class SecuritySettings(BaseSettings):
    """CORS configuration for the wizard front end"""

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(
        default_factory=lambda: ["GET", "POST", "PATCH", "DELETE"]
    )
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from environment variable or list"""
        if isinstance(v, str):
            origin_list = v.split(",")
            return [origin.strip() for origin in origin_list if origin.strip()]
        return v or ["*"]

    model_config = {"env_prefix": "SECURITY_", "extra": "ignore"}


class PricingSettings(BaseSettings):
    """Rates used by the booking wizard when pricing extras and child tickets"""

    # Additional services (VND)
    insurance_per_person: float = Field(default=120000, ge=0)
    sim_per_adult: float = Field(default=100000, ge=0)
    guide_per_day: float = Field(default=1500000, ge=0)

    # Child ticket fractions by height band
    child_under_1m_fraction: float = Field(default=0.0, ge=0.0, le=1.0)
    child_1m_to_1m3_fraction: float = Field(default=0.5, ge=0.0, le=1.0)
    child_over_1m3_fraction: float = Field(default=1.0, ge=0.0, le=1.0)

    currency: str = Field(default="VND")

    model_config = {"env_prefix": "PRICING_", "extra": "ignore"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="Trip Planner Backend")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)
    api_prefix: str = Field(default="/api")

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(default="json", pattern="^(json|text)$")
    log_file: Optional[str] = Field(default=None)

    # Catalog
    seed_catalog: bool = Field(default=True, description="Load sample catalog data at startup")
    default_user_id: int = Field(default=1, ge=1)

    # Wizard client
    api_base_url: str = Field(default="http://localhost:8000")
    client_timeout_seconds: float = Field(default=10.0, gt=0)

    # Nested Settings
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    pricing: PricingSettings = Field(default_factory=PricingSettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for FastAPI"""
        return {
            "allow_origins": self.security.cors_origins,
            "allow_credentials": self.security.cors_allow_credentials,
            "allow_methods": self.security.cors_allow_methods,
            "allow_headers": self.security.cors_allow_headers,
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def env_file_path() -> str:
    """Dotenv file for the global settings; ENV_FILE selects a per-environment file"""
    return os.getenv("ENV_FILE", ".env")


def load_settings(env_file: Optional[str] = None, **overrides: Any) -> Settings:
    """
    Build settings with the nested groups reading the same dotenv file

    Args:
        env_file: Dotenv file to read, or None for environment variables only
        overrides: Field values taking precedence over both

    Returns:
        Settings instance
    """
    overrides.setdefault("security", SecuritySettings(_env_file=env_file))
    overrides.setdefault("pricing", PricingSettings(_env_file=env_file))
    return Settings(_env_file=env_file, **overrides)


# Global settings instance
settings = load_settings(env_file_path())


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = load_settings(env_file_path())
    return settings
