# config/settings.py
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List
from enum import Enum
from dotenv import load_dotenv

from rundeck_importer.core.exceptions import ConfigurationException
from rundeck_importer.models.connection import DEFAULT_API_VERSION

# Load .env file explicitly
load_dotenv()


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class RundeckSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RUNDECK_")
    
    url: str = Field("", description="Base URL of the Rundeck server")
    token: str = Field("", description="API token sent as X-Rundeck-Auth-Token")
    username: str = Field("", description="Username for HTTP Basic authentication")
    password: str = Field("", description="Password for HTTP Basic authentication")
    api_version: str = Field(DEFAULT_API_VERSION, description="Rundeck API version")
    insecure_ssl: str = Field("false", description="'true' disables TLS certificate verification")

    @field_validator('api_version', mode='before')
    @classmethod
    def default_api_version(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_API_VERSION
        return v

    @field_validator('insecure_ssl', mode='before')
    @classmethod
    def default_insecure_ssl(cls, v):
        if v is None or v == "":
            return "false"
        return str(v)

    def validate_auth(self) -> None:
        """Fail unless a URL and one usable auth mode are configured."""
        if not self.url:
            raise ConfigurationException("RUNDECK_URL environment variable is required")
        if not self.token and (not self.username or not self.password):
            raise ConfigurationException(
                "Either RUNDECK_TOKEN or both RUNDECK_USERNAME and RUNDECK_PASSWORD must be set"
            )

    def as_provider_args(self) -> List[str]:
        """Positional values in the order RundeckProvider.configure expects."""
        return [
            self.url,
            self.token,
            self.username,
            self.password,
            self.api_version,
            self.insecure_ssl,
        ]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    debug: bool = Field(False, description="Debug mode")
    log_level: LogLevel = Field(LogLevel.INFO, description="Log level")
    log_config: Optional[str] = Field(None, description="Path to a YAML logging config")
    
    rundeck: RundeckSettings = Field(default_factory=lambda: RundeckSettings())

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    @classmethod
    def create_from_env(cls) -> "Settings":
        """Create settings instance from environment variables."""
        return cls()
