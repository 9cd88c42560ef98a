"""Decision policy - deterministic classification and explanations."""

from loanflow.decision.classifier import classify, estimate_rules_fired
from loanflow.decision.explanations import EXPLANATIONS, explain

__all__ = [
    "classify",
    "estimate_rules_fired",
    "EXPLANATIONS",
    "explain",
]
