"""
Registry of the solver integrations bindings are generated for.

Every entry is checked before anything referencing it is rendered: the
solver class must be constructible from a single SolverContext and the
configuration class from a single UniversalConfigurationBuilder.
"""

import inspect
import logging
import pkgutil
import typing
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Type

from .base_solver import BaseSolver, SolverConfiguration, SolverContext, UniversalConfigurationBuilder
from .exceptions import MissingConfigConstructorError, MissingSolverConstructorError
from .solvers import (
    BitwuzlaSolver,
    BitwuzlaSolverConfiguration,
    Cvc5Solver,
    Cvc5SolverConfiguration,
    YicesSolver,
    YicesSolverConfiguration,
    Z3Solver,
    Z3SolverConfiguration,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverDescription:
    """One supported solver: its kind name and the classes to bind"""
    kind_name: str
    solver_type: Type[BaseSolver]
    config_type: Type[SolverConfiguration]


SOLVERS: Sequence[SolverDescription] = (
    SolverDescription("Z3", Z3Solver, Z3SolverConfiguration),
    SolverDescription("Bitwuzla", BitwuzlaSolver, BitwuzlaSolverConfiguration),
    SolverDescription("Yices", YicesSolver, YicesSolverConfiguration),
    SolverDescription("Cvc5", Cvc5Solver, Cvc5SolverConfiguration),
)


def qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _constructor_argument_type(cls: type) -> Optional[object]:
    """
    Return the declared type of the sole constructor argument of ``cls``.

    ``None`` means the constructor does not take exactly one positional
    argument, or the argument is not annotated.
    """
    init = cls.__init__
    if init is object.__init__:
        return None
    try:
        params = list(inspect.signature(init).parameters.values())[1:]
    except (TypeError, ValueError):
        return None

    if len(params) != 1:
        return None
    param = params[0]
    if param.kind not in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
        return None

    try:
        hints = typing.get_type_hints(init)
    except (NameError, TypeError):
        hints = {}
    annotation = hints.get(param.name, param.annotation)
    if annotation is inspect.Parameter.empty:
        return None
    return annotation


def _is_resolvable(cls: type) -> bool:
    """Whether the generated bindings can find ``cls`` again by its qualified name."""
    try:
        return pkgutil.resolve_name(qualified_name(cls)) is cls
    except (ImportError, AttributeError, ValueError):
        return False


def validate_solver_constructor(entry: SolverDescription) -> None:
    if not _is_resolvable(entry.solver_type):
        raise MissingSolverConstructorError(entry, f"Solver type of {entry} cannot be resolved by qualified name")
    if _constructor_argument_type(entry.solver_type) is not SolverContext:
        raise MissingSolverConstructorError(entry, f"No constructor for solver {entry}")


def validate_config_constructor(entry: SolverDescription) -> None:
    if not _is_resolvable(entry.config_type):
        raise MissingConfigConstructorError(entry, f"Configuration type of {entry} cannot be resolved by qualified name")
    if _constructor_argument_type(entry.config_type) is not UniversalConfigurationBuilder:
        raise MissingConfigConstructorError(entry, f"No configuration constructor for solver {entry}")


def validate_registry(solvers: Iterable[SolverDescription] = SOLVERS) -> None:
    """Validate every entry; the first mismatch aborts."""
    for entry in solvers:
        validate_solver_constructor(entry)
        validate_config_constructor(entry)
        logger.debug("Validated solver %s (%s)", entry.kind_name, qualified_name(entry.solver_type))
