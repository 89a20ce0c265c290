"""Bitwuzla integration"""

from typing import Any, Dict, List, Mapping, Optional

from ..base_solver import BaseSolver, SolverConfiguration, SolverContext, UniversalConfigurationBuilder
from ..models import SolverStatus

TIME_LIMIT_OPTION = "time-limit-per"


class BitwuzlaSolver(BaseSolver):
    """
    Bitwuzla solver driven by its SMT-LIB2 parser.

    Bitwuzla fixes its options when the solver instance is created, so scripts
    are buffered and the instance is only built on the first ``check``,
    ``push`` or ``pop``. Options (including the ``check`` timeout) can change
    until then; changing them afterwards raises RuntimeError.
    """

    backend_module = "bitwuzla"

    def __init__(self, ctx: SolverContext):
        import bitwuzla

        super().__init__(ctx)
        self._bzla = bitwuzla
        self._tm = bitwuzla.TermManager()
        self._options: Dict[str, Any] = {"produce-models": True}
        self._pending: List[str] = []
        self._parser = None

    def _solver(self):
        if self._parser is None:
            options = self._bzla.Options()
            for name, value in self._options.items():
                options.set(name, value)
            self._parser = self._bzla.Parser(self._tm, options)
        while self._pending:
            self._parser.parse(self._pending.pop(0), True, False)
        return self._parser.bitwuzla()

    def assert_smtlib(self, script: str) -> None:
        self._pending.append(script)

    def check(self, timeout: Optional[float] = None) -> SolverStatus:
        if timeout is not None:
            self._set_option(TIME_LIMIT_OPTION, int(timeout * 1000))
        result = self._solver().check_sat()
        if result == self._bzla.Result.SAT:
            return SolverStatus.SAT
        if result == self._bzla.Result.UNSAT:
            return SolverStatus.UNSAT
        return SolverStatus.UNKNOWN

    def push(self) -> None:
        self._solver().push(1)

    def pop(self, levels: int = 1) -> None:
        self._solver().pop(levels)

    def _set_option(self, name: str, value: Any) -> None:
        if self._parser is None:
            self._options[name] = value
        elif self._options.get(name) != value:
            raise RuntimeError(f"Bitwuzla option '{name}' must be set before the first check, push or pop")

    def configure(self, params: Mapping[str, Any]) -> None:
        for name, value in params.items():
            self._set_option(name, value)


class BitwuzlaSolverConfiguration(SolverConfiguration):

    def __init__(self, builder: UniversalConfigurationBuilder):
        super().__init__(builder)

    def set_timeout(self, seconds: float) -> None:
        self.set_int_parameter(TIME_LIMIT_OPTION, int(seconds * 1000))

    def set_random_seed(self, seed: int) -> None:
        self.set_int_parameter("seed", seed)
