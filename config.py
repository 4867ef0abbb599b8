"""
Engine configuration.

Settings live in a frozen dataclass and can be read from a YAML file, so a
deployment can pick the storage layout without code changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Union

from graph import check_weight

DEFAULT_EDGE_WEIGHT = 1.0
DEFAULT_MATRIX_CAPACITY = 16

REPRESENTATIONS = ("list", "matrix")


@dataclass(frozen=True)
class EngineConfig:
    representation: str = "list"
    default_weight: float = DEFAULT_EDGE_WEIGHT
    matrix_capacity: int = DEFAULT_MATRIX_CAPACITY

    def __post_init__(self) -> None:
        if self.representation not in REPRESENTATIONS:
            raise ValueError(
                f"representation must be one of {REPRESENTATIONS}, got {self.representation!r}"
            )
        check_weight(self.default_weight)
        if not isinstance(self.matrix_capacity, int) or isinstance(self.matrix_capacity, bool):
            raise ValueError(f"matrix_capacity must be an integer, got {self.matrix_capacity!r}")
        if self.matrix_capacity < 1:
            raise ValueError("matrix_capacity must be positive")


def _as_capacity(value: Any) -> int:
    # int() would truncate 2.9 to 2
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"expected a whole number, got {value!r}")
    return int(value)


def _read(data: Mapping[str, Any], key: str, convert: Callable[[Any], Any], default: Any) -> Any:
    value = data.get(key, default)
    try:
        return convert(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid {key}: {value!r} ({exc})") from exc


def load_config(path: Union[str, Path]) -> EngineConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return EngineConfig(
        representation=_read(data, "representation", str, "list"),
        default_weight=_read(data, "default_weight", check_weight, DEFAULT_EDGE_WEIGHT),
        matrix_capacity=_read(data, "matrix_capacity", _as_capacity, DEFAULT_MATRIX_CAPACITY),
    )


def make_graph(directed: bool, config: Optional[EngineConfig] = None):
    """Build an empty graph in the configured storage layout."""
    from adjacency_list_graph import AdjacencyListGraph
    from adjacency_matrix_graph import AdjacencyMatrixGraph

    config = config or EngineConfig()
    if config.representation == "matrix":
        return AdjacencyMatrixGraph(
            directed,
            capacity=config.matrix_capacity,
            default_weight=config.default_weight,
        )
    return AdjacencyListGraph(directed, default_weight=config.default_weight)
