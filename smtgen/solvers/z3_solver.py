"""Z3 integration"""

from typing import Any, Mapping, Optional

from ..base_solver import BaseSolver, SolverConfiguration, SolverContext, UniversalConfigurationBuilder
from ..models import SolverStatus


class Z3Solver(BaseSolver):
    """Z3 solver bound to its own z3.Context."""

    backend_module = "z3"

    def __init__(self, ctx: SolverContext):
        import z3

        super().__init__(ctx)
        self._z3 = z3
        self._context = z3.Context()
        self._solver = z3.Solver(ctx=self._context)

    def assert_smtlib(self, script: str) -> None:
        self._solver.from_string(script)

    def check(self, timeout: Optional[float] = None) -> SolverStatus:
        if timeout is not None:
            self._solver.set("timeout", int(timeout * 1000))
        result = self._solver.check()
        if result == self._z3.sat:
            return SolverStatus.SAT
        if result == self._z3.unsat:
            return SolverStatus.UNSAT
        return SolverStatus.UNKNOWN

    def push(self) -> None:
        self._solver.push()

    def pop(self, levels: int = 1) -> None:
        self._solver.pop(levels)

    def configure(self, params: Mapping[str, Any]) -> None:
        for name, value in params.items():
            self._solver.set(name, value)


class Z3SolverConfiguration(SolverConfiguration):

    def __init__(self, builder: UniversalConfigurationBuilder):
        super().__init__(builder)

    def set_timeout(self, seconds: float) -> None:
        self.set_int_parameter("timeout", int(seconds * 1000))

    def set_random_seed(self, seed: int) -> None:
        self.set_int_parameter("random_seed", seed)
