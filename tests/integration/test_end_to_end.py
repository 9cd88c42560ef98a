"""Integration tests for loanflow.

End-to-end tests that verify the full evaluation flow.
"""

import pytest

from loanflow import Applicant, ExecutionMode, LoanProcessOrchestrator
from loanflow.cli import SAMPLE_APPLICANTS
from loanflow.decision.explanations import explain


class TestEvaluationFlowIntegration:
    """Integration tests for the orchestrated evaluation flow."""
    
    @pytest.fixture
    def orchestrator(self):
        """Create an orchestrator through the factory, with no engine."""
        setup = LoanProcessOrchestrator.create()
        assert setup.success
        yield setup.orchestrator
        setup.orchestrator.dispose()
    
    def test_perfect_applicant(self, orchestrator):
        """Perfect case is approved in simulation; both extremes count as fired rules."""
        result = orchestrator.execute(
            Applicant(name="Frank", age=40, income=80000, credit_score=800)
        )
        
        assert result.success is True
        assert result.final_status == "APPROVED"
        assert result.execution_mode == ExecutionMode.SIMULATION
        assert result.rules_fired == 3
        assert explain(result.final_status).startswith("✓ Approved")
    
    def test_all_samples_satisfy_result_invariant(self, orchestrator):
        results = [orchestrator.execute(a) for a in SAMPLE_APPLICANTS]
        
        assert len(results) == 6
        for result in results:
            assert result.success is True
            assert result.final_status
            assert 1 <= result.rules_fired <= 4
            assert result.error_message is None
        assert len({r.process_id for r in results}) == 6
    
    def test_sample_rules_fired(self, orchestrator):
        fired = {a.name: orchestrator.execute(a).rules_fired for a in SAMPLE_APPLICANTS}
        
        assert fired == {
            "Alice": 2,    # low income
            "Bob": 3,      # high income, high credit
            "Charlie": 1,
            "Diana": 2,    # young
            "Eve": 1,
            "Frank": 3,    # high income, high credit
        }
