"""Base solver interface for all SMT solver integrations"""

import importlib.util
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from .models import SolverStatus

logger = logging.getLogger(__name__)


class SolverContext:
    """
    Shared handle every solver is created against.

    Keeps track of the solvers created with it so they can be released
    together when the context is closed.
    """

    def __init__(self, name: str = "default"):
        self.name = name
        self.closed = False
        self._solvers: List["BaseSolver"] = []

    def track(self, solver: "BaseSolver") -> None:
        if self.closed:
            raise RuntimeError(f"Context '{self.name}' is closed")
        self._solvers.append(solver)

    @property
    def solvers(self) -> List["BaseSolver"]:
        return list(self._solvers)

    def close(self) -> None:
        if self.closed:
            return
        for solver in reversed(self._solvers):
            solver.close()
        self._solvers.clear()
        self.closed = True

    def __enter__(self) -> "SolverContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class UniversalConfigurationBuilder:
    """Collects backend option values before they are applied to a solver."""

    def __init__(self):
        self._params: Dict[str, Any] = {}

    def set(self, name: str, value: Any) -> "UniversalConfigurationBuilder":
        self._params[name] = value
        return self

    @property
    def params(self) -> Dict[str, Any]:
        return dict(self._params)

    def __len__(self) -> int:
        return len(self._params)


class SolverConfiguration(ABC):
    """
    Solver specific view over a UniversalConfigurationBuilder.

    Subclasses map the common settings (timeout, random seed) onto the
    option names their backend understands.
    """

    def __init__(self, builder: UniversalConfigurationBuilder):
        self.builder = builder

    def set_bool_parameter(self, name: str, value: bool) -> None:
        self.builder.set(name, bool(value))

    def set_int_parameter(self, name: str, value: int) -> None:
        self.builder.set(name, int(value))

    def set_float_parameter(self, name: str, value: float) -> None:
        self.builder.set(name, float(value))

    def set_string_parameter(self, name: str, value: str) -> None:
        self.builder.set(name, str(value))

    @abstractmethod
    def set_timeout(self, seconds: float) -> None:
        """Per-check time limit."""
        pass

    @abstractmethod
    def set_random_seed(self, seed: int) -> None:
        pass


class BaseSolver(ABC):
    """
    Abstract base class for all solver integrations.

    Every integration is constructed from a single SolverContext. The backing
    library is imported by the constructor, so the class itself can be
    inspected and resolved without it.
    """

    backend_module: Optional[str] = None

    def __init__(self, ctx: SolverContext):
        self.ctx = ctx
        self.closed = False
        ctx.track(self)

    @classmethod
    def is_available(cls) -> bool:
        """Whether the backing library can be imported."""
        if cls.backend_module is None:
            return True
        return importlib.util.find_spec(cls.backend_module) is not None

    @abstractmethod
    def assert_smtlib(self, script: str) -> None:
        """Add the declarations and assertions of an SMT-LIB2 script."""
        pass

    @abstractmethod
    def check(self, timeout: Optional[float] = None) -> SolverStatus:
        pass

    @abstractmethod
    def push(self) -> None:
        pass

    @abstractmethod
    def pop(self, levels: int = 1) -> None:
        pass

    @abstractmethod
    def configure(self, params: Mapping[str, Any]) -> None:
        """Apply option values collected by a UniversalConfigurationBuilder."""
        pass

    def close(self) -> None:
        if not self.closed:
            logger.debug("Closing %s", type(self).__name__)
        self.closed = True

    def __enter__(self) -> "BaseSolver":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
