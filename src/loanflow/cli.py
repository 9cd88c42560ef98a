"""Command-line entry point - runs sample loan applications.

Usage:
    loanflow
    loanflow --scenarios applicants.yaml
    loanflow --engine my_rules.engine:build_engine --log-level DEBUG

Scenario files are YAML, either a list of applicants or a mapping with an
``applicants`` key:

    applicants:
      - name: Alice
        age: 25
        income: 15000
        credit_score: 600
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

import yaml
from pydantic import ValidationError

from loanflow.common.config import Config, get_config
from loanflow.common.exceptions import ConfigurationError, ScenarioError
from loanflow.common.logging import get_logger
from loanflow.core.types import Applicant
from loanflow.decision.explanations import explain
from loanflow.orchestration.engine import EngineFactory, load_engine_factory
from loanflow.orchestration.orchestrator import LoanProcessOrchestrator
from loanflow.orchestration.result import ExecutionResult


SAMPLE_APPLICANTS = (
    Applicant(name="Alice", age=25, income=15000, credit_score=600),    # Low income
    Applicant(name="Bob", age=35, income=60000, credit_score=750),      # High income
    Applicant(name="Charlie", age=28, income=35000, credit_score=675),  # Medium income
    Applicant(name="Diana", age=23, income=30000, credit_score=650),    # Young applicant
    Applicant(name="Eve", age=30, income=25000, credit_score=580),      # Edge case
    Applicant(name="Frank", age=40, income=80000, credit_score=800),    # Perfect case
)

BANNER = "=== Loan Approval System ==="


def load_scenarios(path: Path) -> List[Applicant]:
    """Load applicants from a YAML scenario file.

    Raises:
        ScenarioError: If the file is missing, malformed or invalid
    """
    if not path.exists():
        raise ScenarioError(f"Scenario file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ScenarioError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ScenarioError(f"Cannot read scenario file {path}: {e}") from e

    if isinstance(raw, dict):
        raw = raw.get("applicants")
    if not isinstance(raw, list) or not raw:
        raise ScenarioError(f"Scenario file {path} must contain a non-empty list of applicants")

    try:
        return [Applicant.model_validate(entry) for entry in raw]
    except ValidationError as e:
        raise ScenarioError(
            f"Invalid applicant in {path}",
            details={"errors": e.errors(include_url=False)},
        ) from e


def build_engine_factory(engine_path: Optional[str]) -> Optional[EngineFactory]:
    """Defer engine loading so failures surface through orchestrator setup."""
    if not engine_path:
        return None

    def factory():
        return load_engine_factory(engine_path)()

    return factory


def report(applicant: Applicant, result: ExecutionResult, out: TextIO, err: TextIO) -> None:
    """Print one applicant's decision block."""
    print(f"--- {applicant.name} ---", file=out)
    print(
        f"Applicant: {applicant.name} (Age: {applicant.age}, "
        f"Income: ${applicant.income}, Credit: {applicant.credit_score})",
        file=out,
    )

    if result.success:
        print(f"Decision: {result.final_status}", file=out)
        print(
            f"Process: {result.process_outcome} | Rules fired: {result.rules_fired} "
            f"| Mode: {result.execution_mode.value}",
            file=out,
        )
        print(f"Reason: {explain(result.decision_status)}", file=out)
    else:
        print(f"Process failed: {result.error_message}", file=err)

    print(file=out)


def run(
    applicants: Sequence[Applicant],
    orchestrator: LoanProcessOrchestrator,
    out: TextIO,
    err: TextIO,
) -> int:
    """Evaluate every applicant in order.

    Returns:
        Number of failed evaluations
    """
    failures = 0
    for applicant in applicants:
        result = orchestrator.execute(applicant)
        if not result.success:
            failures += 1
        report(applicant, result, out, err)
    return failures


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loanflow",
        description="Evaluate sample loan applications through the rules engine or simulation",
    )
    parser.add_argument(
        "--scenarios",
        type=Path,
        default=None,
        help="YAML file of applicants (default: built-in samples)",
    )
    parser.add_argument(
        "--engine",
        default=None,
        help="Rules engine factory as 'package.module:factory' (overrides LOANFLOW_ENGINE)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level (overrides LOANFLOW_LOG_LEVEL)",
    )
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
    config: Optional[Config] = None,
) -> int:
    """Run the loan approval demo.

    Returns:
        Exit code: 0 if every evaluation succeeded, 1 otherwise
    """
    out = out or sys.stdout
    err = err or sys.stderr
    args = build_parser().parse_args(argv)

    try:
        config = config or get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}", file=err)
        return 1

    logger = get_logger("loanflow", args.log_level or config.effective_log_level)

    scenario_file = args.scenarios or config.scenario_file
    try:
        applicants = load_scenarios(scenario_file) if scenario_file else list(SAMPLE_APPLICANTS)
    except ScenarioError as e:
        logger.error(f"Cannot load scenarios: {e.message}")
        print(f"Scenario error: {e.message}", file=err)
        return 1

    print(BANNER, file=out)
    print(file=out)

    setup = LoanProcessOrchestrator.create(
        engine_factory=build_engine_factory(args.engine or config.engine)
    )
    if not setup.success:
        print(f"Initialization failed: {setup.error.message}", file=err)
        return 1

    with setup.orchestrator as orchestrator:
        failures = run(applicants, orchestrator, out, err)

    if failures:
        logger.warning(f"{failures} of {len(applicants)} evaluations failed")
        return 1
    return 0


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
