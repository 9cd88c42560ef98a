"""Common utilities - logging, config, exceptions."""

from loanflow.common.logging import get_logger
from loanflow.common.config import Config, get_config, reset_config
from loanflow.common.exceptions import (
    LoanFlowException,
    ConfigurationError,
    InitializationError,
    EngineError,
    ScenarioError,
)

__all__ = [
    # Logging
    "get_logger",
    # Config
    "Config",
    "get_config",
    "reset_config",
    # Exceptions
    "LoanFlowException",
    "ConfigurationError",
    "InitializationError",
    "EngineError",
    "ScenarioError",
]
