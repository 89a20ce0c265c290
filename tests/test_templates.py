"""Tests for templates.py fragment rendering"""

import pytest

from smtgen.config import GeneratorConfig
from smtgen.exceptions import MissingConfigConstructorError, MissingSolverConstructorError
from smtgen.registry import SOLVERS, SolverDescription
from smtgen.templates import (
    render_config_binding,
    render_config_loader,
    render_create_configuration_builder,
    render_create_instance,
    render_fragments,
    render_header,
    render_solver_binding,
    render_solver_loader,
    render_solver_type_getter,
    render_solver_utils,
)

from .doubles import FAKE_SOLVERS, Z3_ONLY, FakeZ3Configuration, TwoArgumentSolver, PlainConfiguration


def test_rendering_is_deterministic():
    assert render_solver_utils("pkg.generated") == render_solver_utils("pkg.generated")
    assert render_fragments("pkg.generated", FAKE_SOLVERS) == render_fragments("pkg.generated", FAKE_SOLVERS)


def test_generated_source_compiles():
    compile(render_solver_utils("pkg.generated", SOLVERS), "SolverUtils.py", "exec")
    compile(render_solver_utils("pkg.generated", ()), "SolverUtils.py", "exec")


class TestHeader:

    def test_package_and_banner(self):
        header = render_header("pkg.generated")
        assert header.startswith('"""\nDo not edit.\nGenerated by SolverUtilsGenerator.')
        assert "Package: pkg.generated" in header
        assert 'PACKAGE_NAME = "pkg.generated"' in header

    def test_imports(self):
        header = render_header("pkg.generated")
        assert (
            "from smtgen.base_solver import BaseSolver, SolverConfiguration, "
            "SolverContext, UniversalConfigurationBuilder"
        ) in header
        assert "from smtgen.exceptions import CustomSolverError, UnregisteredSolverError" in header
        assert "from smtgen.models import SolverType" in header

    def test_configuration_builder_alias(self):
        assert "ConfigurationBuilder = Callable[[UniversalConfigurationBuilder], C]" in render_header("p")

    def test_enum_name_from_config(self):
        cfg = GeneratorConfig(solver_type_qualified_name="acme.kinds.Kind")
        assert "from acme.kinds import Kind" in render_header("p", cfg)


def test_loaders():
    assert "def create_solver_constructor(solver_qualified_name: str)" in render_solver_loader()
    assert "pkgutil.resolve_name(solver_qualified_name)" in render_solver_loader()
    assert "def create_config_constructor(" in render_config_loader()
    assert "return lambda builder: cls(builder)" in render_config_loader()


class TestBindings:

    def test_solver_binding(self):
        binding = render_solver_binding(Z3_ONLY[0])
        assert binding == (
            "@lru_cache(maxsize=None)\n"
            "def _solver_constructor_Z3() -> Callable[[SolverContext], BaseSolver]:\n"
            '    return create_solver_constructor("tests.doubles.FakeZ3Solver")'
        )

    def test_config_binding(self):
        binding = render_config_binding(Z3_ONLY[0])
        assert "def _config_constructor_Z3()" in binding
        assert 'create_config_constructor("tests.doubles.FakeZ3Configuration")' in binding

    def test_invalid_solver_is_not_rendered(self):
        with pytest.raises(MissingSolverConstructorError):
            render_solver_binding(SolverDescription("Z3", TwoArgumentSolver, FakeZ3Configuration))

    def test_invalid_config_is_not_rendered(self):
        with pytest.raises(MissingConfigConstructorError):
            render_config_binding(SolverDescription("Z3", TwoArgumentSolver, PlainConfiguration))


def test_solver_type_getter_covers_registry():
    getter = render_solver_type_getter(FAKE_SOLVERS)
    for entry in FAKE_SOLVERS:
        assert f'"tests.doubles.{entry.solver_type.__name__}": SolverType.{entry.kind_name},' in getter
    assert "SolverType.Custom)" in getter


class TestDispatch:

    def test_create_instance_cases(self):
        body = render_create_instance(Z3_ONLY)
        assert body.count("if solver_type is SolverType.Z3:") == 1
        assert "return _solver_constructor_Z3()(ctx)" in body
        assert 'raise CustomSolverError("User defined solvers should not be created with this builder")' in body
        assert body.count("if solver_type is") == 2

    def test_create_configuration_builder_cases(self):
        body = render_create_configuration_builder(Z3_ONLY)
        assert body.count("if solver_type is SolverType.Z3:") == 1
        assert "return lambda builder: _config_constructor_Z3()(builder)" in body
        assert "User defined solver config builders should not be created with this builder" in body

    def test_full_registry(self):
        body = render_create_instance(FAKE_SOLVERS)
        for entry in FAKE_SOLVERS:
            assert f"if solver_type is SolverType.{entry.kind_name}:" in body


def test_fragment_order():
    fragments = render_fragments("pkg.generated", Z3_ONLY)
    assert len(fragments) == 8
    assert fragments[0].startswith('"""')
    assert fragments[1].startswith("def create_solver_constructor")
    assert fragments[2].startswith("def create_config_constructor")
    assert "_solver_constructor_Z3" in fragments[3]
    assert "_config_constructor_Z3" in fragments[4]
    assert fragments[5].startswith("_SOLVER_TYPES")
    assert fragments[6].startswith("def create_instance")
    assert fragments[7].startswith("def create_configuration_builder")
