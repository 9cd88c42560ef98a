"""Rules engine collaborator - the narrow contract the orchestrator relies on.

An engine hands out one session per evaluation. The orchestrator disposes
the session before returning, whatever the outcome. Engines report the
decision status in their evaluation instead of writing it onto the
applicant.
"""

import importlib
from enum import IntEnum
from typing import Callable, Optional, Protocol
from pydantic import BaseModel, Field

from loanflow.common.exceptions import InitializationError
from loanflow.core.types import Applicant


class ProcessState(IntEnum):
    """Process instance states reported by engines."""
    PENDING = 0
    ACTIVE = 1
    COMPLETED = 2
    ABORTED = 3
    SUSPENDED = 4


# Vendor-specific code treated as completion
VENDOR_COMPLETED_CODE = 5


def map_process_state(code: int) -> str:
    """Label a process state code.
    
    Args:
        code: State code from the engine
        
    Returns:
        State name, "COMPLETED" for the vendor alias, or "UNKNOWN(<code>)"
    """
    if code == VENDOR_COMPLETED_CODE:
        return ProcessState.COMPLETED.name
    try:
        return ProcessState(code).name
    except ValueError:
        return f"UNKNOWN({code})"


class EngineEvaluation(BaseModel):
    """What an engine session reports back for one applicant."""
    process_id: str = Field(..., description="Engine process instance identifier")
    process_state: int = Field(..., description="Engine process state code")
    rules_fired: int = Field(..., ge=0, description="Rules fired during evaluation")
    final_status: Optional[str] = Field(
        default=None, description="Decision status, if the engine reached one"
    )


class EngineSession(Protocol):
    """Per-evaluation handle acquired from a rules engine."""
    
    def evaluate(self, applicant: Applicant) -> EngineEvaluation:
        """Evaluate an applicant. Raises EngineError on malfunction."""
        ...
    
    def dispose(self) -> None:
        """Release the session."""
        ...


class RuleEngine(Protocol):
    """External rules/process engine."""
    
    def new_session(self) -> EngineSession:
        ...
    
    def dispose(self) -> None:
        ...


# Returns None when no engine is configured
EngineFactory = Callable[[], Optional[RuleEngine]]


def load_engine_factory(path: str) -> EngineFactory:
    """Resolve an engine factory from a "package.module:callable" path.
    
    Raises:
        InitializationError: If the path is malformed or cannot be imported
    """
    module_name, _, attr = path.partition(":")
    if not module_name or not attr:
        raise InitializationError(
            f"Invalid engine path '{path}', expected 'package.module:factory'",
            details={"engine": path},
        )
    
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise InitializationError(
            f"Cannot import engine module '{module_name}': {e}",
            details={"engine": path},
        ) from e
    
    factory = getattr(module, attr, None)
    if factory is None or not callable(factory):
        raise InitializationError(
            f"Engine module '{module_name}' has no callable '{attr}'",
            details={"engine": path},
        )
    return factory
