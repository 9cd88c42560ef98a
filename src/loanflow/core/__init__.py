"""Core types."""

from loanflow.core.types import Applicant, LoanStatus

__all__ = [
    "Applicant",
    "LoanStatus",
]
