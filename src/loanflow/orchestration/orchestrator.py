"""Loan Process Orchestrator - engine evaluation with local fallback.

Lifecycle per applicant:
1. Refuse to work once disposed, or for input that is not an Applicant
2. Evaluate through the rules engine, if one is configured
3. On engine absence or failure, run the four-stage local simulation
4. Return an ExecutionResult

Error Handling:
- Engine failures fall back to simulation and are not surfaced as failures
- Simulation failures become a failed ExecutionResult
- execute() never raises
"""

import itertools
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from loanflow.common.exceptions import InitializationError
from loanflow.core.types import Applicant
from loanflow.decision.classifier import classify, estimate_rules_fired
from loanflow.orchestration.engine import (
    EngineEvaluation,
    EngineFactory,
    ProcessState,
    RuleEngine,
    map_process_state,
)
from loanflow.orchestration.result import ExecutionMode, ExecutionResult


logger = logging.getLogger(__name__)


STAGES = (
    "Initial Validation",
    "Risk Assessment",
    "Credit Check",
    "Final Decision",
)

NOT_INITIALIZED_MESSAGE = "Loan process orchestrator not initialized"

# Status reported when the engine completes without setting one
DEFAULT_ENGINE_STATUS = "COMPLETED"


@dataclass
class OrchestratorSetup:
    """Result of building an orchestrator.

    Contains either a ready orchestrator or the initialization error.
    """
    success: bool
    orchestrator: Optional["LoanProcessOrchestrator"] = None
    error: Optional[InitializationError] = None


class LoanProcessOrchestrator:
    """Runs loan applications through the engine or the local simulation."""

    def __init__(
        self,
        engine: Optional[RuleEngine] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        """Initialize orchestrator.

        Args:
            engine: Rules engine. Simulation only if not provided.
            clock: Monotonic clock used for simulated process ids.
        """
        self._engine = engine
        self._clock = clock or time.monotonic_ns
        self._sequence = itertools.count(1)
        self._ready = True

    @classmethod
    def create(
        cls,
        engine_factory: Optional[EngineFactory] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> OrchestratorSetup:
        """Build an orchestrator, reporting engine setup failure as a value.

        Args:
            engine_factory: Builds the rules engine; may return None for no engine
            clock: Monotonic clock used for simulated process ids

        Returns:
            OrchestratorSetup with the orchestrator or an InitializationError
        """
        engine = None
        if engine_factory is not None:
            try:
                engine = engine_factory()
            except InitializationError as e:
                logger.error(f"Rules engine initialization failed: {e.message}")
                return OrchestratorSetup(success=False, error=e)
            except Exception as e:
                logger.error(
                    f"Rules engine initialization failed: {type(e).__name__}: {e}"
                )
                return OrchestratorSetup(
                    success=False,
                    error=InitializationError(
                        f"Rules engine initialization failed: {e}",
                        details={"error_type": type(e).__name__},
                    ),
                )

        if engine is None:
            logger.info("Loan process orchestrator initialized (no rules engine, using simulation)")
        else:
            logger.info(f"Loan process orchestrator initialized with {type(engine).__name__}")

        return OrchestratorSetup(success=True, orchestrator=cls(engine=engine, clock=clock))

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def has_engine(self) -> bool:
        return self._engine is not None

    def execute(self, applicant: Applicant) -> ExecutionResult:
        """Evaluate one applicant.

        Args:
            applicant: Validated applicant

        Returns:
            ExecutionResult. Never raises.
        """
        if not self._ready:
            return ExecutionResult.failure(NOT_INITIALIZED_MESSAGE)

        if not isinstance(applicant, Applicant):
            return ExecutionResult.failure(
                f"Invalid applicant: expected Applicant, got {type(applicant).__name__}"
            )

        if self._engine is not None:
            try:
                return self._execute_with_engine(applicant)
            except Exception as e:
                logger.warning(
                    f"Rules engine evaluation failed, using simulation: "
                    f"{type(e).__name__}: {e}"
                )

        try:
            return self._simulate(applicant)
        except Exception as e:
            logger.error(f"Process simulation failed: {type(e).__name__}: {e}")
            return ExecutionResult.failure(f"Process simulation failed: {e}")

    def _execute_with_engine(self, applicant: Applicant) -> ExecutionResult:
        """Run the applicant through a fresh engine session."""
        session = self._engine.new_session()
        try:
            evaluation: EngineEvaluation = session.evaluate(applicant)
        finally:
            session.dispose()

        outcome = map_process_state(evaluation.process_state)
        logger.info(
            f"Engine process {evaluation.process_id} finished: {outcome}, "
            f"{evaluation.rules_fired} rules fired"
        )

        # Engines may report zero rules fired; the result always counts the base rule
        return ExecutionResult.completed(
            process_id=evaluation.process_id,
            process_state=evaluation.process_state,
            process_outcome=outcome,
            final_status=evaluation.final_status or DEFAULT_ENGINE_STATUS,
            decision_status=evaluation.final_status,
            execution_mode=ExecutionMode.ENGINE,
            rules_fired=max(1, evaluation.rules_fired),
        )

    def _simulate(self, applicant: Applicant) -> ExecutionResult:
        """Run the four-stage local simulation."""
        process_id = f"sim-{self._clock()}-{next(self._sequence)}"
        logger.info(f"Running process simulation {process_id} for {applicant.name}")

        stages: List[str] = []
        for number, stage in enumerate(STAGES, start=1):
            logger.info(f"  Process stage {number}: {stage}")
            stages.append(stage)

        status = classify(applicant.income, applicant.credit_score)
        rules_fired = estimate_rules_fired(
            applicant.age, applicant.income, applicant.credit_score
        )
        logger.info(f"Process simulation {process_id} completed with status {status.value}")

        return ExecutionResult.completed(
            process_id=process_id,
            process_state=ProcessState.COMPLETED.value,
            process_outcome=ProcessState.COMPLETED.name,
            final_status=status.value,
            decision_status=status.value,
            execution_mode=ExecutionMode.SIMULATION,
            rules_fired=rules_fired,
            stages=stages,
        )

    def dispose(self) -> None:
        """Release the engine. The orchestrator refuses work afterwards."""
        if not self._ready:
            return
        self._ready = False

        if self._engine is not None:
            try:
                self._engine.dispose()
            except Exception as e:
                logger.warning(f"Error disposing rules engine: {type(e).__name__}: {e}")
        logger.info("Loan process orchestrator disposed")

    def __enter__(self) -> "LoanProcessOrchestrator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()
