"""Reference solver integrations.

Each module imports its backend library lazily, inside the solver
constructor, so the classes can be resolved and inspected without it.
"""

from .z3_solver import Z3Solver, Z3SolverConfiguration
from .bitwuzla_solver import BitwuzlaSolver, BitwuzlaSolverConfiguration
from .yices_solver import YicesSolver, YicesSolverConfiguration
from .cvc5_solver import Cvc5Solver, Cvc5SolverConfiguration

__all__ = [
    "Z3Solver", "Z3SolverConfiguration",
    "BitwuzlaSolver", "BitwuzlaSolverConfiguration",
    "YicesSolver", "YicesSolverConfiguration",
    "Cvc5Solver", "Cvc5SolverConfiguration",
]
