"""Rendering configuration."""

from collections.abc import Callable
from dataclasses import dataclass, fields
from pathlib import Path

# Callback returning extra Graphviz attributes for a module id. A "group" key
# places the node (and edges between members of the same group) in a subgraph.
NodeAttributes = Callable[[str], dict | None]


@dataclass
class GraphConfig:
    """Visual settings for a dependency graph."""

    rankdir: str = "LR"
    layout: str = "dot"
    font_name: str = "Arial"
    font_size: str = "14px"
    background_color: str = "#111111"
    node_color: str = "#c6c5fe"
    node_shape: str = "box"
    node_style: str = "rounded"
    no_dependency_color: str = "#cfffac"
    cyclic_node_color: str = "#ff6c60"
    edge_color: str = "#757575"
    graphviz_options: dict[str, dict] | None = None  # {"G": {...}, "E": {...}, "N": {...}}
    graphviz_path: str | None = None  # Directory containing the dot executable
    node_attributes: NodeAttributes | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "GraphConfig":
        """Build a config from a plain mapping (e.g. a parsed YAML file).

        Keys may be written in snake_case or kebab-case.

        Args:
            data: Mapping of option names to values.

        Returns:
            A GraphConfig with the given options applied over the defaults.

        Raises:
            ValueError: If data is not a mapping or an option name is not recognised.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(cls)} - {"node_attributes"}
        values = {}
        for key, value in data.items():
            name = str(key).replace("-", "_")
            if name not in known:
                raise ValueError(f"Unknown config option: {key!r}")
            values[name] = value
        return cls(**values)


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Parsed configuration values.

    Raises:
        ValueError: If the file is not valid YAML.
    """
    try:
        import yaml
    except ImportError as err:
        raise ImportError("PyYAML required for config files: pip install pyyaml") from err

    with open(config_path) as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as err:
            raise ValueError(f"{config_path}: invalid YAML: {err}") from err
