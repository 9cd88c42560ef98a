"""Configuration management - Centralized configuration for loanflow.

Provides environment-aware configuration with sensible defaults.
All configuration is loaded from environment variables with fallbacks.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Type, TypeVar

from loanflow.common.exceptions import ConfigurationError


class Environment(str, Enum):
    """Application environment."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


E = TypeVar("E", bound=Enum)


def _env_enum(enum_cls: Type[E], name: str, default: str) -> E:
    """Read an enum value from the environment."""
    raw = os.getenv(name, default)
    try:
        return enum_cls(raw)
    except ValueError:
        allowed = [member.value for member in enum_cls]
        raise ConfigurationError(
            f"{name}={raw!r} is not valid",
            details={"variable": name, "allowed": allowed},
        )


def _env_optional(name: str) -> Optional[str]:
    """Read an optional string, treating blank values as unset."""
    value = os.getenv(name, "").strip()
    return value or None


@dataclass
class Config:
    """Central configuration object for loanflow.
    
    All settings can be overridden via environment variables prefixed with LOANFLOW_.
    
    Example:
        LOANFLOW_ENVIRONMENT=production
        LOANFLOW_LOG_LEVEL=DEBUG
        LOANFLOW_ENGINE=my_rules.engine:build_engine
    """
    
    # Core settings
    environment: Environment = field(
        default_factory=lambda: _env_enum(
            Environment, "LOANFLOW_ENVIRONMENT", "development"
        )
    )
    debug: bool = field(
        default_factory=lambda: os.getenv("LOANFLOW_DEBUG", "false").lower() == "true"
    )
    log_level: LogLevel = field(
        default_factory=lambda: _env_enum(LogLevel, "LOANFLOW_LOG_LEVEL", "INFO")
    )
    
    # Rules engine, as "package.module:factory". Unset means simulation only.
    engine: Optional[str] = field(
        default_factory=lambda: _env_optional("LOANFLOW_ENGINE")
    )
    
    # Scenario file overriding the built-in sample applicants
    scenario_file: Optional[Path] = field(
        default_factory=lambda: (
            Path(os.environ["LOANFLOW_SCENARIO_FILE"])
            if _env_optional("LOANFLOW_SCENARIO_FILE") else None
        )
    )
    
    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.engine is not None and ":" not in self.engine:
            raise ConfigurationError(
                "LOANFLOW_ENGINE must look like 'package.module:factory'",
                details={"engine": self.engine},
            )
        
        # Warn about debug in production
        if self.environment == Environment.PRODUCTION and self.debug:
            import warnings
            warnings.warn(
                "Debug mode is enabled in production environment",
                RuntimeWarning,
                stacklevel=2
            )
    
    @property
    def effective_log_level(self) -> str:
        """Log level name, forced to DEBUG when debug mode is on."""
        return LogLevel.DEBUG.value if self.debug else self.log_level.value
    
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION
    
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT


# Singleton instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance.
    
    Returns:
        Config: The global configuration singleton.
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
