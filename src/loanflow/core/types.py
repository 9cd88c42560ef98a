"""Core types and enums."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class LoanStatus(str, Enum):
    """Outcomes produced by the local decision classifier."""
    APPROVED = "APPROVED"
    CONDITIONALLY_APPROVED = "CONDITIONALLY_APPROVED"
    REJECTED = "REJECTED"
    UNDER_REVIEW = "UNDER_REVIEW"


class Applicant(BaseModel):
    """Loan applicant.
    
    Immutable. Credit score is conventionally 300-850 but is not
    range-checked; out-of-range values are classified as-is.
    """
    name: str = Field(..., description="Applicant name")
    age: int = Field(..., ge=0, description="Age in years")
    income: int = Field(..., ge=0, description="Annual income in currency units")
    credit_score: int = Field(..., description="Credit score")
    
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "Frank",
                "age": 40,
                "income": 80000,
                "credit_score": 800,
            }
        },
    )
