"""cvc5 integration"""

from typing import Any, Dict, List, Mapping, Optional

from ..base_solver import BaseSolver, SolverConfiguration, SolverContext, UniversalConfigurationBuilder
from ..models import SolverStatus

TIME_LIMIT_OPTION = "tlimit-per"


def _option_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Cvc5Solver(BaseSolver):
    """
    cvc5 solver fed through an incremental SMT-LIB2 input parser.

    Most cvc5 options are rejected once the solver is fully initialized, which
    happens with the first declaration. Scripts are therefore buffered and
    options collected until the first ``check``, ``push`` or ``pop``.
    Declarations made by earlier scripts stay visible to later ones because a
    single parser (and symbol manager) is kept for the solver's lifetime.
    """

    backend_module = "cvc5"

    def __init__(self, ctx: SolverContext):
        import cvc5

        super().__init__(ctx)
        self._cvc5 = cvc5
        self._solver = cvc5.Solver()
        self._solver.setOption("incremental", "true")
        self._solver.setOption("produce-models", "true")
        self._options: Dict[str, str] = {}
        self._pending: List[str] = []
        self._parser = None

    def _started(self):
        if self._parser is None:
            for name, value in self._options.items():
                self._solver.setOption(name, value)
            self._parser = self._cvc5.InputParser(self._solver)
            self._parser.setIncrementalStringInput(self._cvc5.InputLanguage.SMT_LIB_2_6, "smtgen")
        while self._pending:
            self._parser.appendIncrementalStringInput(self._pending.pop(0))
            sm = self._parser.getSymbolManager()
            while True:
                cmd = self._parser.nextCommand()
                if cmd.isNull():
                    break
                cmd.invoke(self._solver, sm)
        return self._solver

    def assert_smtlib(self, script: str) -> None:
        self._pending.append(script)

    def check(self, timeout: Optional[float] = None) -> SolverStatus:
        if timeout is not None:
            self._set_option(TIME_LIMIT_OPTION, int(timeout * 1000))
        result = self._started().checkSat()
        if result.isSat():
            return SolverStatus.SAT
        if result.isUnsat():
            return SolverStatus.UNSAT
        return SolverStatus.UNKNOWN

    def push(self) -> None:
        self._started().push(1)

    def pop(self, levels: int = 1) -> None:
        self._started().pop(levels)

    def _set_option(self, name: str, value: Any) -> None:
        value = _option_value(value)
        if self._parser is None:
            self._options[name] = value
            return
        if self._options.get(name) == value:
            return
        try:
            self._solver.setOption(name, value)
        except RuntimeError as e:
            raise RuntimeError(f"cvc5 option '{name}' must be set before the first check, push or pop") from e
        self._options[name] = value

    def configure(self, params: Mapping[str, Any]) -> None:
        for name, value in params.items():
            self._set_option(name, value)


class Cvc5SolverConfiguration(SolverConfiguration):

    def __init__(self, builder: UniversalConfigurationBuilder):
        super().__init__(builder)

    def set_timeout(self, seconds: float) -> None:
        self.set_int_parameter(TIME_LIMIT_OPTION, int(seconds * 1000))

    def set_random_seed(self, seed: int) -> None:
        self.set_int_parameter("seed", seed)
