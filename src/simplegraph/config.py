"""Graph configuration, optionally read from pyproject.toml.

Reads the [tool.simplegraph] section so a project can pin its traversal
order in one place:

    [tool.simplegraph]
    vertex_order = "sorted"
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from simplegraph.exceptions import ConfigError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

VERTEX_ORDERS = ("insertion", "sorted")


@dataclass(frozen=True)
class GraphConfig:
    """Per-graph settings.

    Attributes:
        vertex_order: "insertion" keeps vertices in the order they first
            entered the graph; "sorted" traverses them in ascending order.
    """

    vertex_order: str = "insertion"

    def __post_init__(self) -> None:
        if self.vertex_order not in VERTEX_ORDERS:
            raise ConfigError(
                f"Unknown vertex_order: {self.vertex_order!r}\n\n"
                f"  -> Expected one of: {', '.join(VERTEX_ORDERS)}"
            )


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from start directory to find pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> GraphConfig:
    """Load [tool.simplegraph] from the nearest pyproject.toml.

    Returns default config if no pyproject.toml or no [tool.simplegraph] section.

    Raises:
        ConfigError: If the section has unknown keys or invalid values
    """
    path = find_pyproject(start)
    if path is None:
        return GraphConfig()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get("simplegraph", {})
    if not section:
        return GraphConfig()
    if not isinstance(section, dict):
        raise ConfigError(f"[tool.simplegraph] in {path} must be a table")

    unknown = set(section) - {"vertex_order"}
    if unknown:
        raise ConfigError(
            f"Unknown keys in [tool.simplegraph]: {', '.join(sorted(unknown))}\n\n"
            f"  -> File: {path}"
        )

    logger.debug("Loaded graph config from %s", path)
    return GraphConfig(vertex_order=section.get("vertex_order", "insertion"))
