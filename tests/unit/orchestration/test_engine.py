"""Unit tests for the rules engine collaborator helpers."""

import collections

import pytest
from pydantic import ValidationError

from loanflow.common.exceptions import InitializationError
from loanflow.orchestration.engine import (
    EngineEvaluation,
    ProcessState,
    load_engine_factory,
    map_process_state,
)


class TestMapProcessState:
    
    @pytest.mark.parametrize("code,label", [
        (0, "PENDING"),
        (1, "ACTIVE"),
        (2, "COMPLETED"),
        (3, "ABORTED"),
        (4, "SUSPENDED"),
    ])
    def test_known_states(self, code, label):
        assert map_process_state(code) == label
    
    def test_vendor_code_is_completed(self):
        assert map_process_state(5) == "COMPLETED"
    
    @pytest.mark.parametrize("code", [-1, 6, 99])
    def test_unknown_codes(self, code):
        assert map_process_state(code) == f"UNKNOWN({code})"
    
    def test_enum_values(self):
        assert ProcessState.COMPLETED == 2
        assert map_process_state(ProcessState.SUSPENDED) == "SUSPENDED"


class TestEngineEvaluation:
    
    def test_status_optional(self):
        evaluation = EngineEvaluation(process_id="1", process_state=2, rules_fired=0)
        assert evaluation.final_status is None
    
    def test_negative_rules_rejected(self):
        with pytest.raises(ValidationError):
            EngineEvaluation(process_id="1", process_state=2, rules_fired=-1)


class TestLoadEngineFactory:
    
    def test_resolves_callable(self):
        assert load_engine_factory("collections:OrderedDict") is collections.OrderedDict
    
    @pytest.mark.parametrize("path", ["collections", ":OrderedDict", "collections:"])
    def test_malformed_path(self, path):
        with pytest.raises(InitializationError, match="Invalid engine path"):
            load_engine_factory(path)
    
    def test_missing_module(self):
        with pytest.raises(InitializationError, match="Cannot import"):
            load_engine_factory("no_such_rules_engine_pkg:build")
    
    def test_missing_attribute(self):
        with pytest.raises(InitializationError, match="no callable 'build_engine'"):
            load_engine_factory("collections:build_engine")
    
    def test_non_callable_attribute(self):
        with pytest.raises(InitializationError):
            load_engine_factory("string:ascii_letters")
