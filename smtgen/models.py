"""Enumerations shared by the generator and the generated bindings"""

from enum import Enum


class SolverType(Enum):
    """Known solver integrations. ``Custom`` marks user supplied solvers."""
    Z3 = "Z3"
    Bitwuzla = "Bitwuzla"
    Yices = "Yices"
    Cvc5 = "Cvc5"
    Custom = "Custom"


class SolverStatus(Enum):
    SAT = "sat"
    UNSAT = "unsat"
    UNKNOWN = "unknown"
