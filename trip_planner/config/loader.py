"""
Configuration loader utility for environment-specific settings.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from .settings import Settings, Environment, load_settings

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Utility class for loading environment-specific configurations"""

    @staticmethod
    def load_environment_config(environment: Optional[str] = None) -> Settings:
        """
        Load configuration for the specified environment.

        Args:
            environment: Target environment (development, staging, production, testing)
                        If None, uses ENVIRONMENT env var or defaults to development

        Returns:
            Settings instance with environment-specific configuration
        """
        if environment is None:
            environment = os.getenv("ENVIRONMENT", "development")

        env = Environment(environment.lower())
        env_file_path = Path(f".env.{env.value}")

        if env_file_path.exists():
            return load_settings(str(env_file_path), environment=env)

        logger.warning(
            f"Environment file {env_file_path} not found, using default settings"
        )
        return load_settings(environment=env)

    @staticmethod
    def export_environment(environment: str) -> Optional[str]:
        """
        Point settings built later in this process, or in child processes,
        at the environment's .env file.

        Args:
            environment: Environment name to export

        Returns:
            Absolute path of the exported file, or None if it does not exist
        """
        env = Environment(environment.lower())
        os.environ["ENVIRONMENT"] = env.value

        env_file_path = Path(f".env.{env.value}")
        if not env_file_path.exists():
            return None

        resolved = str(env_file_path.resolve())
        os.environ["ENV_FILE"] = resolved
        return resolved

    @staticmethod
    def get_available_environments() -> list[str]:
        """Get list of available environment configurations"""
        env_files = []
        for env_file in Path(".").glob(".env.*"):
            if env_file.name.endswith(".sample"):
                continue
            env_files.append(env_file.name.replace(".env.", ""))
        return sorted(env_files)

    @staticmethod
    def validate_environment_config(environment: str) -> bool:
        """
        Validate that an environment configuration exists and is valid.

        Args:
            environment: Environment name to validate

        Returns:
            True if configuration is valid, False otherwise
        """
        try:
            env = Environment(environment.lower())
            if not Path(f".env.{env.value}").exists():
                return False

            settings = ConfigLoader.load_environment_config(environment)
            required_settings = [
                settings.app_name,
                settings.environment,
                settings.host,
                settings.port,
            ]
            return all(setting is not None for setting in required_settings)

        except ValueError:
            return False

    @staticmethod
    def create_sample_env_file(environment: str, output_path: Optional[str] = None) -> str:
        """
        Create a sample .env file for the specified environment.

        Args:
            environment: Target environment
            output_path: Optional custom output path

        Returns:
            Path to the created sample file
        """
        env = Environment(environment.lower())

        if output_path is None:
            output_path = f".env.{env.value}.sample"

        default_settings = Settings()

        sample_content = f"""# Sample configuration for {env.value} environment
# Copy this file to .env.{env.value} and modify as needed

# Application Configuration
APP_NAME={default_settings.app_name}
APP_VERSION={default_settings.app_version}
ENVIRONMENT={env.value}
DEBUG={'true' if env == Environment.DEVELOPMENT else 'false'}

# Server Configuration
HOST={default_settings.host}
PORT={default_settings.port}
RELOAD={'true' if env == Environment.DEVELOPMENT else 'false'}
WORKERS={1 if env == Environment.DEVELOPMENT else 4}

# Logging Configuration
LOG_LEVEL={default_settings.log_level.value}
LOG_FORMAT=json

# Catalog
SEED_CATALOG={'false' if env == Environment.TESTING else 'true'}

# Security Configuration
SECURITY_CORS_ORIGINS=["*"]

# Pricing Configuration
PRICING_INSURANCE_PER_PERSON={default_settings.pricing.insurance_per_person:.0f}
PRICING_SIM_PER_ADULT={default_settings.pricing.sim_per_adult:.0f}
PRICING_GUIDE_PER_DAY={default_settings.pricing.guide_per_day:.0f}
"""

        with open(output_path, "w") as f:
            f.write(sample_content)

        return output_path


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    """Convenience function to load configuration for an environment"""
    return ConfigLoader.load_environment_config(environment)
