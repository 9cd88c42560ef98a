"""Custom exceptions for loanflow.

Provides a hierarchy of exceptions for different error types.
All loanflow exceptions inherit from LoanFlowException.
"""

from typing import Any, Dict, Optional


class LoanFlowException(Exception):
    """Base exception for all loanflow errors.
    
    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Additional context about the error
    """
    
    def __init__(
        self,
        message: str,
        code: str = "LOANFLOW_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured output."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(LoanFlowException):
    """Raised when configuration is invalid or missing."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFIG_ERROR", details=details)


class InitializationError(LoanFlowException):
    """Raised when the rules engine cannot be set up."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="INIT_ERROR", details=details)


class EngineError(LoanFlowException):
    """Raised when the rules engine fails during an evaluation."""
    
    def __init__(
        self,
        message: str,
        engine_name: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        details = details or {}
        details["engine_name"] = engine_name
        super().__init__(message, code="ENGINE_ERROR", details=details)


class ScenarioError(LoanFlowException):
    """Raised when a scenario file cannot be read or validated."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="SCENARIO_ERROR", details=details)
