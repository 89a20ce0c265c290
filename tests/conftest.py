import importlib.util
import uuid
from pathlib import Path

import pytest

from smtgen.config import set_config
from smtgen.emitter import write_solver_utils


@pytest.fixture(autouse=True)
def reset_config():
    set_config(None)
    yield
    set_config(None)


def load_module(path: Path):
    """Import a generated file under a unique module name."""
    spec = importlib.util.spec_from_file_location(f"generated_{uuid.uuid4().hex}", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def generate(tmp_path):
    """Generate bindings for a registry and import the result."""

    def _generate(solvers, package_name="pkg.generated"):
        path = write_solver_utils(tmp_path / "out", package_name, solvers)
        return load_module(path)

    return _generate
