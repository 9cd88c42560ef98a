"""Execution result - the single record produced per evaluation."""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, model_validator


class ExecutionMode(str, Enum):
    """Where the decision was made."""
    ENGINE = "engine"
    SIMULATION = "simulation"


class ExecutionResult(BaseModel):
    """Outcome of one orchestrated evaluation.
    
    A successful result always carries a final status and a rules-fired
    count of at least one. The final status falls back to the process
    outcome when no decision was reached; decision_status keeps the raw one.
    A failed result carries only an error message.
    """
    success: bool = Field(..., description="Whether the evaluation completed")
    process_id: Optional[str] = Field(default=None, description="Opaque process identifier")
    process_state: Optional[int] = Field(default=None, description="Process state code")
    process_outcome: Optional[str] = Field(
        default=None, description="Human-readable label for the process state"
    )
    final_status: Optional[str] = Field(default=None, description="Decision status")
    decision_status: Optional[str] = Field(
        default=None,
        description="Status as decided by the engine or classifier; None if none was reached",
    )
    execution_mode: Optional[ExecutionMode] = Field(
        default=None, description="Engine or local simulation"
    )
    rules_fired: Optional[int] = Field(default=None, description="Rules fired (or estimated)")
    stages: List[str] = Field(
        default_factory=list, description="Simulated process stages, in execution order"
    )
    error_message: Optional[str] = Field(default=None, description="Failure reason")
    
    @model_validator(mode="after")
    def _check_invariant(self) -> "ExecutionResult":
        if self.success:
            if not self.final_status:
                raise ValueError("successful result requires final_status")
            if self.rules_fired is None or self.rules_fired < 1:
                raise ValueError("successful result requires rules_fired >= 1")
            if self.execution_mode is None or not self.process_id:
                raise ValueError("successful result requires execution_mode and process_id")
            if self.error_message is not None:
                raise ValueError("successful result cannot carry error_message")
        else:
            if not self.error_message:
                raise ValueError("failed result requires error_message")
            populated = [
                name for name in (
                    "process_id", "process_state", "process_outcome",
                    "final_status", "decision_status", "execution_mode", "rules_fired",
                )
                if getattr(self, name) is not None
            ]
            if populated or self.stages:
                raise ValueError(f"failed result cannot carry {populated or ['stages']}")
        return self
    
    @classmethod
    def completed(
        cls,
        process_id: str,
        process_state: int,
        process_outcome: str,
        final_status: str,
        execution_mode: ExecutionMode,
        rules_fired: int,
        stages: Optional[List[str]] = None,
        decision_status: Optional[str] = None,
    ) -> "ExecutionResult":
        """Factory for a successful result."""
        return cls(
            success=True,
            process_id=process_id,
            process_state=process_state,
            process_outcome=process_outcome,
            final_status=final_status,
            decision_status=decision_status,
            execution_mode=execution_mode,
            rules_fired=rules_fired,
            stages=list(stages or []),
        )
    
    @classmethod
    def failure(cls, message: str) -> "ExecutionResult":
        """Factory for a failed result."""
        return cls(success=False, error_message=message)
