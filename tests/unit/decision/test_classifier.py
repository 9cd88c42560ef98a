"""Unit tests for the decision classifier and rules-fired estimate.

Rule order matters: the first matching rule wins.
"""

import pytest

from loanflow.core.types import LoanStatus
from loanflow.decision.classifier import classify, estimate_rules_fired


class TestApprovalRule:
    """Rule 1: credit >= 700 and income >= 50000."""
    
    @pytest.mark.parametrize("income,credit", [
        (50000, 700),
        (80000, 800),
        (1_000_000, 850),
        (50000, 999),
    ])
    def test_approved(self, income, credit):
        assert classify(income, credit) == LoanStatus.APPROVED
    
    def test_boundaries_are_inclusive(self):
        """Exactly on both thresholds is approved."""
        assert classify(50000, 700) == LoanStatus.APPROVED
        assert classify(49999, 700) != LoanStatus.APPROVED
        assert classify(50000, 699) != LoanStatus.APPROVED


class TestConditionalRule:
    """Rule 2: credit >= 600 and income >= 30000."""
    
    @pytest.mark.parametrize("income,credit", [
        (30000, 600),
        (49999, 699),
        (40000, 650),
        (35000, 675),
    ])
    def test_conditionally_approved(self, income, credit):
        assert classify(income, credit) == LoanStatus.CONDITIONALLY_APPROVED
    
    def test_high_credit_without_approval_income(self):
        """Credit qualifies for rule 1 but income only for rule 2."""
        assert classify(45000, 780) == LoanStatus.CONDITIONALLY_APPROVED
    
    def test_high_income_without_approval_credit(self):
        assert classify(90000, 650) == LoanStatus.CONDITIONALLY_APPROVED


class TestRejectionRule:
    """Rule 3: credit < 500 or income < 20000."""
    
    def test_low_income_with_excellent_credit(self):
        """Rules 1 and 2 fail on income, rule 3 rejects."""
        assert classify(15000, 750) == LoanStatus.REJECTED
    
    def test_low_credit_with_high_income(self):
        assert classify(90000, 450) == LoanStatus.REJECTED
    
    @pytest.mark.parametrize("income,credit", [
        (19999, 650),
        (0, 0),
        (25000, 499),
        (15000, 600),
    ])
    def test_rejected(self, income, credit):
        assert classify(income, credit) == LoanStatus.REJECTED
    
    def test_out_of_range_credit_is_classified(self):
        """No validation: negative or huge scores still classify."""
        assert classify(60000, -10) == LoanStatus.REJECTED
        assert classify(60000, 10_000) == LoanStatus.APPROVED


class TestUnderReview:
    """Fallthrough when no rule matches."""
    
    @pytest.mark.parametrize("income,credit", [
        (25000, 580),
        (20000, 500),
        (29999, 699),
        (100000, 599),
    ])
    def test_under_review(self, income, credit):
        assert classify(income, credit) == LoanStatus.UNDER_REVIEW


class TestClassifierProperties:
    """Determinism and totality."""
    
    def test_idempotent(self):
        assert classify(40000, 650) == classify(40000, 650)
        assert classify(15000, 750) == classify(15000, 750)
    
    def test_total_over_grid(self):
        for income in range(0, 100001, 5000):
            for credit in range(300, 851, 25):
                assert isinstance(classify(income, credit), LoanStatus)
    
    def test_status_is_string_enum(self):
        assert classify(80000, 800) == "APPROVED"


class TestEstimateRulesFired:
    """Rules-fired heuristic."""
    
    def test_base_rule_only(self):
        """No extremes and not young."""
        assert estimate_rules_fired(age=40, income=50000, credit_score=700) == 1
    
    def test_young_low_income(self):
        """Base + income extreme + age."""
        assert estimate_rules_fired(age=23, income=15000, credit_score=600) == 3
    
    def test_all_conditions(self):
        assert estimate_rules_fired(age=18, income=10000, credit_score=400) == 4
    
    def test_strict_inequalities(self):
        """Thresholds themselves do not count as extremes."""
        assert estimate_rules_fired(age=25, income=20000, credit_score=500) == 1
        assert estimate_rules_fired(age=24, income=50001, credit_score=701) == 4
    
    def test_bounded(self):
        for age in (0, 24, 25, 90):
            for income in (0, 19999, 20000, 50000, 50001):
                for credit in (0, 499, 500, 700, 701):
                    assert 1 <= estimate_rules_fired(age, income, credit) <= 4
