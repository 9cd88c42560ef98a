"""Centralized constants for the loan decision policy."""


# ===== DECISION POLICY =====
class DecisionConstants:
    # Rule 1: approval
    APPROVE_MIN_CREDIT = 700
    APPROVE_MIN_INCOME = 50000
    
    # Rule 2: conditional approval
    CONDITIONAL_MIN_CREDIT = 600
    CONDITIONAL_MIN_INCOME = 30000
    
    # Rule 3: rejection
    REJECT_CREDIT_BELOW = 500
    REJECT_INCOME_BELOW = 20000


# ===== RULES-FIRED ESTIMATE =====
class EstimateConstants:
    HIGH_INCOME_ABOVE = 50000
    LOW_INCOME_BELOW = 20000
    HIGH_CREDIT_ABOVE = 700
    LOW_CREDIT_BELOW = 500
    YOUNG_AGE_BELOW = 25
