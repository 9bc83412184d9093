"""Graph options and their loading from pyproject.toml."""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from ._errors import ConfigError

logger = logging.getLogger(__name__)


class GraphOptions(BaseModel):
    """Construction flags for a graph.

    Both flags are fixed for the lifetime of a graph built from them.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    directed: bool = True
    weighted: bool = False


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_options(pyproject_path: Path) -> GraphOptions:
    """Load and validate [tool.adjgraph] options from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphOptions. Defaults are used when the section is missing.

    Raises:
        ConfigError: If the file is not valid TOML or the options are invalid

    """
    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("adjgraph", {})
    if not isinstance(section, dict):
        msg = f"Invalid [tool.adjgraph] in {pyproject_path}: expected a table"
        raise ConfigError(msg)

    try:
        options = GraphOptions.model_validate(section)
    except ValidationError as e:
        msg = f"Invalid [tool.adjgraph] in {pyproject_path}: {e}"
        raise ConfigError(msg) from e

    logger.debug(f"Loaded graph options from {pyproject_path}: {options!r}")
    return options


def get_options() -> GraphOptions:
    """Get options from pyproject.toml in current directory or parents.

    Returns:
        GraphOptions (defaults if no pyproject.toml or no [tool.adjgraph] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraphOptions()
    return load_options(pyproject_path)
