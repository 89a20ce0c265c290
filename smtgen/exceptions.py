"""Custom exceptions for the solver binding generator"""


class SolverGenException(Exception):
    """Base exception for smtgen"""
    pass


class ValidationError(SolverGenException):
    """Raised when a registry entry does not have the expected constructor shape"""

    def __init__(self, entry, message: str):
        super().__init__(message)
        self.entry = entry


class MissingSolverConstructorError(ValidationError):
    """Raised when a solver type has no constructor taking a single SolverContext"""
    pass


class MissingConfigConstructorError(ValidationError):
    """Raised when a configuration type has no constructor taking a single builder"""
    pass


class ConfigurationError(SolverGenException):
    """Raised when generator configuration or arguments are invalid"""
    pass


class SolverBindingError(SolverGenException):
    """Base class for errors raised by generated solver bindings"""
    pass


class CustomSolverError(SolverBindingError):
    """Raised when a user defined solver kind is dispatched through generated bindings"""
    pass


class UnregisteredSolverError(SolverBindingError):
    """Raised when a solver kind has no usable binding (unknown kind or missing backend)"""
    pass
