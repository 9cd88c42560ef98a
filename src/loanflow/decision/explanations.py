"""Explanation templates - rationale text for decision statuses.

Engines may use a different status vocabulary than the local classifier,
so lookups fall back to a generic message instead of failing.
"""

from typing import Optional, Union

from loanflow.core.types import LoanStatus

EXPLANATIONS = {
    "APPROVED": "✓ Approved: High income + good credit",
    "REJECTED": "✗ Rejected: Low income or poor credit",
    "APPROVED_HIGH_RISK": "⚠ High Risk Approval: Medium income + credit",
    "YOUNG_APPLICANT_REVIEW": "👤 Young Applicant Review: Under 25",
    "REVIEW": "📋 Manual Review: Requires assessment",
}

NO_DECISION = "❓ No decision made"
UNKNOWN_STATUS = "❓ Unknown status: {status}"


def explain(status: Optional[Union[str, LoanStatus]]) -> str:
    """Return the rationale for a status, or a default for unknown ones."""
    if status is None:
        return NO_DECISION
    
    key = status.value if isinstance(status, LoanStatus) else str(status)
    return EXPLANATIONS.get(key, UNKNOWN_STATUS.format(status=key))
