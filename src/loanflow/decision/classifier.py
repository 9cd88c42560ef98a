"""Decision classifier - maps income and credit score to a loan status.

Rules are checked in a fixed order and the first match wins. The ranges
overlap, so the order is part of the policy: an applicant with credit 750
and income 15000 misses rules 1 and 2 on income and is REJECTED by rule 3.
"""

from loanflow.common.constants import DecisionConstants, EstimateConstants
from loanflow.core.types import LoanStatus


def classify(income: int, credit_score: int) -> LoanStatus:
    """Classify an application.
    
    Pure and total: every input maps to exactly one status.
    
    Args:
        income: Annual income in currency units
        credit_score: Credit score
        
    Returns:
        LoanStatus for the first matching rule
    """
    # Rule 1
    if (credit_score >= DecisionConstants.APPROVE_MIN_CREDIT
            and income >= DecisionConstants.APPROVE_MIN_INCOME):
        return LoanStatus.APPROVED
    
    # Rule 2
    if (credit_score >= DecisionConstants.CONDITIONAL_MIN_CREDIT
            and income >= DecisionConstants.CONDITIONAL_MIN_INCOME):
        return LoanStatus.CONDITIONALLY_APPROVED
    
    # Rule 3
    if (credit_score < DecisionConstants.REJECT_CREDIT_BELOW
            or income < DecisionConstants.REJECT_INCOME_BELOW):
        return LoanStatus.REJECTED
    
    return LoanStatus.UNDER_REVIEW


def estimate_rules_fired(age: int, income: int, credit_score: int) -> int:
    """Estimate how many rule conditions an engine would have fired.
    
    Heuristic used only in simulation mode. Always between 1 and 4.
    """
    count = 1  # base rule
    
    if (income > EstimateConstants.HIGH_INCOME_ABOVE
            or income < EstimateConstants.LOW_INCOME_BELOW):
        count += 1
    
    if (credit_score > EstimateConstants.HIGH_CREDIT_ABOVE
            or credit_score < EstimateConstants.LOW_CREDIT_BELOW):
        count += 1
    
    if age < EstimateConstants.YOUNG_AGE_BELOW:
        count += 1
    
    return count
