"""
Source templates for the generated SolverUtils module.

Every function here is pure: it maps the registry (or one entry of it) to a
fragment of Python source. Fragments are joined by ``render_solver_utils``.
"""

from collections import defaultdict
from textwrap import dedent, indent
from typing import Dict, Iterable, List, Optional, Sequence

from .base_solver import BaseSolver, SolverConfiguration, SolverContext, UniversalConfigurationBuilder
from .config import GeneratorConfig, get_config
from .exceptions import CustomSolverError, UnregisteredSolverError
from .registry import (
    SOLVERS,
    SolverDescription,
    qualified_name,
    validate_config_constructor,
    validate_registry,
    validate_solver_constructor,
)

SOLVER_CONSTRUCTOR = "_solver_constructor_"
CONFIG_CONSTRUCTOR = "_config_constructor_"
SOLVER_CONSTRUCTOR_CREATOR = "create_solver_constructor"
CONFIG_CONSTRUCTOR_CREATOR = "create_config_constructor"

CONTEXT = SolverContext.__name__
SOLVER = BaseSolver.__name__
CONFIG = SolverConfiguration.__name__
CONFIG_BUILDER = UniversalConfigurationBuilder.__name__


def _cfg(config: Optional[GeneratorConfig]) -> GeneratorConfig:
    return config if config is not None else get_config()


def _import_lines(classes: Iterable[type]) -> List[str]:
    by_module: Dict[str, List[str]] = defaultdict(list)
    for cls in classes:
        by_module[cls.__module__].append(cls.__name__)
    return [
        f"from {module} import {', '.join(sorted(names))}"
        for module, names in sorted(by_module.items())
    ]


def render_header(package_name: str, config: Optional[GeneratorConfig] = None) -> str:
    cfg = _cfg(config)
    imports = _import_lines([
        SolverContext,
        BaseSolver,
        SolverConfiguration,
        UniversalConfigurationBuilder,
        CustomSolverError,
        UnregisteredSolverError,
    ])
    imports.append(f"from {cfg.solver_type_module} import {cfg.solver_type_name}")
    imports.sort()
    import_block = "\n".join(imports)
    return (
        '"""\n'
        "Do not edit.\n"
        f"Generated by {cfg.generator_name}.\n"
        "\n"
        f"Package: {package_name}\n"
        '"""\n'
        "\n"
        "import pkgutil\n"
        "from functools import lru_cache\n"
        "from typing import Callable, Dict, Type, TypeVar\n"
        "\n"
        f"{import_block}\n"
        "\n"
        f'PACKAGE_NAME = "{package_name}"\n'
        "\n"
        f'C = TypeVar("C", bound={CONFIG})\n'
        f"ConfigurationBuilder = Callable[[{CONFIG_BUILDER}], C]"
    )


def render_solver_loader() -> str:
    return dedent(f'''\
        def {SOLVER_CONSTRUCTOR_CREATOR}(solver_qualified_name: str) -> Callable[[{CONTEXT}], {SOLVER}]:
            try:
                cls = pkgutil.resolve_name(solver_qualified_name)
            except (ImportError, AttributeError, ValueError) as e:
                raise UnregisteredSolverError(f"Solver {{solver_qualified_name}} is not registered") from e
            if not cls.is_available():
                raise UnregisteredSolverError(
                    f"Solver {{solver_qualified_name}} is not registered: "
                    f"backend '{{cls.backend_module}}' is not installed"
                )
            return lambda ctx: cls(ctx)''')


def render_config_loader() -> str:
    return dedent(f'''\
        def {CONFIG_CONSTRUCTOR_CREATOR}(
            config_qualified_name: str
        ) -> Callable[[{CONFIG_BUILDER}], {CONFIG}]:
            try:
                cls = pkgutil.resolve_name(config_qualified_name)
            except (ImportError, AttributeError, ValueError) as e:
                raise UnregisteredSolverError(f"Configuration {{config_qualified_name}} is not registered") from e
            return lambda builder: cls(builder)''')


def render_solver_binding(solver: SolverDescription) -> str:
    # render_fragments validates the whole registry first; this check covers direct callers
    validate_solver_constructor(solver)

    return dedent(f'''\
        @lru_cache(maxsize=None)
        def {SOLVER_CONSTRUCTOR}{solver.kind_name}() -> Callable[[{CONTEXT}], {SOLVER}]:
            return {SOLVER_CONSTRUCTOR_CREATOR}("{qualified_name(solver.solver_type)}")''')


def render_config_binding(solver: SolverDescription) -> str:
    # same as render_solver_binding
    validate_config_constructor(solver)

    return dedent(f'''\
        @lru_cache(maxsize=None)
        def {CONFIG_CONSTRUCTOR}{solver.kind_name}() -> Callable[[{CONFIG_BUILDER}], {CONFIG}]:
            return {CONFIG_CONSTRUCTOR_CREATOR}("{qualified_name(solver.config_type)}")''')


def render_solver_type_getter(
    solvers: Sequence[SolverDescription] = SOLVERS,
    config: Optional[GeneratorConfig] = None,
) -> str:
    cfg = _cfg(config)
    solver_type = cfg.solver_type_name
    mapping = "\n".join(
        f'    "{qualified_name(s.solver_type)}": {solver_type}.{s.kind_name},'
        for s in solvers
    )
    lines = [
        f"_SOLVER_TYPES: Dict[str, {solver_type}] = {{",
        *([mapping] if mapping else []),
        "}",
        "",
        "",
        f"def solver_type_of(solver_cls: Type[{SOLVER}]) -> {solver_type}:",
        f'    return _SOLVER_TYPES.get(f"{{solver_cls.__module__}}.{{solver_cls.__qualname__}}", '
        f"{solver_type}.{cfg.custom_kind})",
    ]
    return "\n".join(lines)


def _dispatch_branches(cases: List[str], custom_error: str, config: GeneratorConfig) -> str:
    solver_type = config.solver_type_name
    branches = cases + [
        f"if solver_type is {solver_type}.{config.custom_kind}:\n"
        f'    raise CustomSolverError("{custom_error}")',
        'raise UnregisteredSolverError(f"No binding for solver type {solver_type}")',
    ]
    return indent("\n".join(branches), "    ")


def render_create_instance(
    solvers: Sequence[SolverDescription] = SOLVERS,
    config: Optional[GeneratorConfig] = None,
) -> str:
    cfg = _cfg(config)
    cases = [
        f"if solver_type is {cfg.solver_type_name}.{s.kind_name}:\n"
        f"    return {SOLVER_CONSTRUCTOR}{s.kind_name}()(ctx)"
        for s in solvers
    ]
    body = _dispatch_branches(cases, "User defined solvers should not be created with this builder", cfg)
    return (
        f"def create_instance(solver_type: {cfg.solver_type_name}, ctx: {CONTEXT}) -> {SOLVER}:\n"
        f"{body}"
    )


def render_create_configuration_builder(
    solvers: Sequence[SolverDescription] = SOLVERS,
    config: Optional[GeneratorConfig] = None,
) -> str:
    cfg = _cfg(config)
    cases = [
        f"if solver_type is {cfg.solver_type_name}.{s.kind_name}:\n"
        f"    return lambda builder: {CONFIG_CONSTRUCTOR}{s.kind_name}()(builder)"
        for s in solvers
    ]
    body = _dispatch_branches(
        cases, "User defined solver config builders should not be created with this builder", cfg
    )
    return (
        f"def create_configuration_builder(solver_type: {cfg.solver_type_name}) -> ConfigurationBuilder:\n"
        f"{body}"
    )


def render_fragments(
    package_name: str,
    solvers: Sequence[SolverDescription] = SOLVERS,
    config: Optional[GeneratorConfig] = None,
) -> List[str]:
    """All fragments of the generated module, in emission order."""
    validate_registry(solvers)

    fragments = [
        render_header(package_name, config),
        render_solver_loader(),
        render_config_loader(),
    ]
    for solver in solvers:
        fragments.append(render_solver_binding(solver))
        fragments.append(render_config_binding(solver))
    fragments.append(render_solver_type_getter(solvers, config))
    fragments.append(render_create_instance(solvers, config))
    fragments.append(render_create_configuration_builder(solvers, config))
    return fragments


def render_solver_utils(
    package_name: str,
    solvers: Sequence[SolverDescription] = SOLVERS,
    config: Optional[GeneratorConfig] = None,
) -> str:
    return "\n\n\n".join(render_fragments(package_name, solvers, config)) + "\n"
