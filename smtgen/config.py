"""Configuration management for the binding generator"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GeneratorConfig:
    """
    Global configuration for the binding generator.

    The generator is driven only by its two command line arguments, so the
    configuration is not loaded from files or environment variables. It holds
    the fixed names the templates refer to.
    """

    # Output
    generated_file_name: str = "SolverUtils.py"
    generator_name: str = "SolverUtilsGenerator"

    # Names referenced by the generated module
    solver_type_qualified_name: str = "smtgen.models.SolverType"
    custom_kind: str = "Custom"

    # Logging
    log_level: str = "INFO"

    @property
    def solver_type_name(self) -> str:
        return self.solver_type_qualified_name.rpartition(".")[2]

    @property
    def solver_type_module(self) -> str:
        return self.solver_type_qualified_name.rpartition(".")[0]


_config: Optional[GeneratorConfig] = None


def get_config() -> GeneratorConfig:
    """Get global configuration instance"""
    global _config
    if _config is None:
        _config = GeneratorConfig()
    return _config


def set_config(config: Optional[GeneratorConfig]) -> None:
    """Set global configuration instance (``None`` restores the defaults)"""
    global _config
    _config = config
