"""
Tests for registry.py constructor shape validation.

Covers:
- the shipped registry passes validation without solver backends installed
- solver and configuration classes with the wrong constructor shape
- validate_registry() stops on the first failing entry
"""

import pytest

from smtgen.base_solver import BaseSolver, SolverConfiguration
from smtgen.exceptions import MissingConfigConstructorError, MissingSolverConstructorError, ValidationError
from smtgen.models import SolverType
from smtgen.registry import (
    SOLVERS,
    SolverDescription,
    qualified_name,
    validate_config_constructor,
    validate_registry,
    validate_solver_constructor,
)
from smtgen.solvers import Z3Solver

from .doubles import (
    FakeZ3Configuration,
    FakeZ3Solver,
    KeywordOnlySolver,
    PlainConfiguration,
    TwoArgumentSolver,
    UntypedSolver,
    WrongBuilderConfiguration,
)


class TestShippedRegistry:

    def test_emission_order(self):
        assert [s.kind_name for s in SOLVERS] == ["Z3", "Bitwuzla", "Yices", "Cvc5"]

    def test_kinds_exist_in_solver_type(self):
        for entry in SOLVERS:
            assert SolverType[entry.kind_name].value == entry.kind_name

    def test_entry_types(self):
        for entry in SOLVERS:
            assert issubclass(entry.solver_type, BaseSolver)
            assert issubclass(entry.config_type, SolverConfiguration)

    def test_validates(self):
        validate_registry(SOLVERS)

    def test_entries_are_immutable(self):
        with pytest.raises(AttributeError):
            SOLVERS[0].kind_name = "Other"


class TestSolverConstructor:

    def test_valid_solver(self):
        validate_solver_constructor(SolverDescription("Z3", FakeZ3Solver, FakeZ3Configuration))

    @pytest.mark.parametrize("solver_cls", [TwoArgumentSolver, UntypedSolver, KeywordOnlySolver])
    def test_wrong_shape_fails(self, solver_cls):
        entry = SolverDescription("Z3", solver_cls, FakeZ3Configuration)
        with pytest.raises(MissingSolverConstructorError) as excinfo:
            validate_solver_constructor(entry)
        assert excinfo.value.entry is entry
        assert solver_cls.__name__ in str(excinfo.value)

    def test_config_type_is_not_a_solver(self):
        entry = SolverDescription("Z3", FakeZ3Configuration, FakeZ3Configuration)
        with pytest.raises(MissingSolverConstructorError):
            validate_solver_constructor(entry)


class TestConfigConstructor:

    def test_valid_config(self):
        validate_config_constructor(SolverDescription("Z3", FakeZ3Solver, FakeZ3Configuration))

    @pytest.mark.parametrize("config_cls", [WrongBuilderConfiguration, PlainConfiguration])
    def test_wrong_shape_fails(self, config_cls):
        entry = SolverDescription("Z3", FakeZ3Solver, config_cls)
        with pytest.raises(MissingConfigConstructorError) as excinfo:
            validate_config_constructor(entry)
        assert excinfo.value.entry is entry

    def test_errors_share_base(self):
        entry = SolverDescription("Z3", FakeZ3Solver, PlainConfiguration)
        with pytest.raises(ValidationError):
            validate_config_constructor(entry)


def test_validate_registry_reports_failing_entry():
    good = SolverDescription("Z3", FakeZ3Solver, FakeZ3Configuration)
    bad = SolverDescription("Yices", TwoArgumentSolver, FakeZ3Configuration)
    with pytest.raises(MissingSolverConstructorError) as excinfo:
        validate_registry([good, bad])
    assert excinfo.value.entry.kind_name == "Yices"


def test_qualified_name():
    assert qualified_name(Z3Solver) == "smtgen.solvers.z3_solver.Z3Solver"
    assert qualified_name(FakeZ3Solver) == "tests.doubles.FakeZ3Solver"


class TestUnresolvableTypes:

    def test_solver_defined_in_function(self):
        class LocalSolver(FakeZ3Solver):
            pass

        entry = SolverDescription("Z3", LocalSolver, FakeZ3Configuration)
        with pytest.raises(MissingSolverConstructorError, match="cannot be resolved") as excinfo:
            validate_registry([entry])
        assert excinfo.value.entry is entry

    def test_config_defined_in_function(self):
        class LocalConfiguration(FakeZ3Configuration):
            pass

        entry = SolverDescription("Z3", FakeZ3Solver, LocalConfiguration)
        with pytest.raises(MissingConfigConstructorError, match="cannot be resolved"):
            validate_config_constructor(entry)

    def test_shadowed_name(self, monkeypatch):
        # the module attribute now points at a different class
        import tests.doubles

        original = tests.doubles.FakeYicesSolver
        monkeypatch.setattr(tests.doubles, "FakeYicesSolver", FakeZ3Solver)
        entry = SolverDescription("Yices", original, FakeZ3Configuration)
        with pytest.raises(MissingSolverConstructorError):
            validate_solver_constructor(entry)
