"""loanflow - Loan approval decisions with rules engine fallback."""

__version__ = "0.1.0"

from loanflow.core.types import Applicant, LoanStatus
from loanflow.orchestration.result import ExecutionMode, ExecutionResult
from loanflow.orchestration.orchestrator import LoanProcessOrchestrator

__all__ = [
    "Applicant",
    "LoanStatus",
    "ExecutionMode",
    "ExecutionResult",
    "LoanProcessOrchestrator",
]
