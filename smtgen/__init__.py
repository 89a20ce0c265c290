"""
SMT solver binding generator.

Generates a single ``SolverUtils.py`` module with lazy constructors,
a type lookup and dispatch functions for the supported solvers:
- Z3
- Bitwuzla
- Yices
- cvc5
"""

__version__ = "0.1.0"
__author__ = "smtgen contributors"
