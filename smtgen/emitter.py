"""Writes the generated SolverUtils module to disk"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from .config import GeneratorConfig, get_config
from .exceptions import ConfigurationError
from .registry import SOLVERS, SolverDescription
from .templates import render_solver_utils

logger = logging.getLogger(__name__)


def validate_package_name(package_name: str) -> None:
    if not package_name or not all(part.isidentifier() for part in package_name.split(".")):
        raise ConfigurationError(f"Invalid package name: {package_name!r}")


def write_solver_utils(
    output_dir: Union[str, Path],
    package_name: str,
    solvers: Sequence[SolverDescription] = SOLVERS,
    config: Optional[GeneratorConfig] = None,
) -> Path:
    """
    Render and write the SolverUtils module into ``output_dir``.

    The whole text is rendered (and every registry entry validated) before
    the output file is opened, so a failure never leaves a partial file.
    An existing file at the target path is overwritten.
    """
    cfg = config if config is not None else get_config()
    validate_package_name(package_name)

    source = render_solver_utils(package_name, solvers, cfg)

    output_path = Path(output_dir) / cfg.generated_file_name
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(source)

    logger.info("Generated %s bindings for %d solvers in %s", package_name, len(solvers), output_path)
    return output_path
