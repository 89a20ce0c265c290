"""Yices integration"""

import re
from typing import Any, Dict, Iterator, Mapping, Optional

from ..base_solver import BaseSolver, SolverConfiguration, SolverContext, UniversalConfigurationBuilder
from ..models import SolverStatus

_DECLARE_RE = re.compile(
    r"^\(\s*declare-(?:const\s+(?P<cname>\S+)|fun\s+(?P<fname>\S+)\s+\(\s*\))\s+(?P<sort>.+)\)$",
    re.DOTALL,
)
_BITVEC_RE = re.compile(r"^\(\s*_\s+BitVec\s+(\d+)\s*\)$")
_ASSERT_RE = re.compile(r"^\(\s*assert\s+(?P<term>.+)\)$", re.DOTALL)


def _top_level_forms(script: str) -> Iterator[str]:
    """Yield the top level s-expressions of an SMT-LIB2 script."""
    depth = 0
    start = None
    in_comment = False
    for i, ch in enumerate(script):
        if in_comment:
            in_comment = ch != "\n"
            continue
        if ch == ";":
            in_comment = True
        elif ch == "(":
            if depth == 0:
                start = i
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0 and start is not None:
                yield script[start:i + 1]
                start = None
            elif depth < 0:
                raise ValueError("Unbalanced parentheses in SMT-LIB2 script")
    if depth != 0:
        raise ValueError("Unbalanced parentheses in SMT-LIB2 script")


class YicesSolver(BaseSolver):
    """
    Yices solver.

    The Yices Python API has no SMT-LIB2 front end, so ``assert_smtlib``
    understands constant declarations (Bool, Int, Real, BitVec) and
    ``assert`` commands whose terms are valid Yices term syntax. Other
    commands are ignored.
    """

    backend_module = "yices"

    def __init__(self, ctx: SolverContext):
        import yices

        super().__init__(ctx)
        self._yices = yices
        self._params: Dict[str, Any] = {}
        self._config = yices.Config()
        self._context = yices.Context(self._config)
        self._search = None

    def _sort(self, sort: str):
        types = self._yices.Types
        sort = sort.strip()
        if sort == "Bool":
            return types.bool_type()
        if sort == "Int":
            return types.int_type()
        if sort == "Real":
            return types.real_type()
        bv = _BITVEC_RE.match(sort)
        if bv:
            return types.bv_type(int(bv.group(1)))
        raise ValueError(f"Unsupported sort for Yices: {sort}")

    def assert_smtlib(self, script: str) -> None:
        terms = self._yices.Terms
        for form in _top_level_forms(script):
            declaration = _DECLARE_RE.match(form)
            if declaration:
                name = declaration.group("cname") or declaration.group("fname")
                terms.new_uninterpreted_term(self._sort(declaration.group("sort")), name)
                continue
            assertion = _ASSERT_RE.match(form)
            if assertion:
                self._context.assert_formula(terms.parse_term(assertion.group("term")))

    def check(self, timeout: Optional[float] = None) -> SolverStatus:
        if timeout is None and "timeout" in self._params:
            timeout = self._params["timeout"]
        status = self._context.check_context(params=self._search, timeout=timeout)
        if status == self._yices.Status.SAT:
            return SolverStatus.SAT
        if status == self._yices.Status.UNSAT:
            return SolverStatus.UNSAT
        return SolverStatus.UNKNOWN

    def push(self) -> None:
        self._context.push()

    def pop(self, levels: int = 1) -> None:
        for _ in range(levels):
            self._context.pop()

    def configure(self, params: Mapping[str, Any]) -> None:
        search = self._yices.Parameters()
        for name, value in params.items():
            if name == "timeout":
                self._params["timeout"] = value
            else:
                search.set_param(name, str(value))
                self._params[name] = value
        self._search = search

    def close(self) -> None:
        if not self.closed:
            self._context.dispose()
            self._config.dispose()
        super().close()


class YicesSolverConfiguration(SolverConfiguration):

    def __init__(self, builder: UniversalConfigurationBuilder):
        super().__init__(builder)

    def set_timeout(self, seconds: float) -> None:
        # Yices takes the time limit per check call, in seconds
        self.set_int_parameter("timeout", max(1, int(seconds)))

    def set_random_seed(self, seed: int) -> None:
        self.set_int_parameter("random-seed", seed)
