"""Orchestration - engine collaborator, simulation fallback, results."""

from loanflow.orchestration.engine import (
    EngineEvaluation,
    EngineFactory,
    EngineSession,
    ProcessState,
    RuleEngine,
    load_engine_factory,
    map_process_state,
)
from loanflow.orchestration.result import ExecutionMode, ExecutionResult
from loanflow.orchestration.orchestrator import (
    NOT_INITIALIZED_MESSAGE,
    STAGES,
    LoanProcessOrchestrator,
    OrchestratorSetup,
)

__all__ = [
    # Engine collaborator
    "EngineEvaluation",
    "EngineFactory",
    "EngineSession",
    "ProcessState",
    "RuleEngine",
    "load_engine_factory",
    "map_process_state",
    # Results
    "ExecutionMode",
    "ExecutionResult",
    # Orchestrator
    "NOT_INITIALIZED_MESSAGE",
    "STAGES",
    "LoanProcessOrchestrator",
    "OrchestratorSetup",
]
