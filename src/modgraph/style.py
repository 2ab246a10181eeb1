"""Map a GraphConfig to Graphviz attribute sets."""

from collections.abc import Sequence
from dataclasses import dataclass

from .config import GraphConfig


@dataclass(frozen=True)
class GraphStyles:
    """Default attributes for the graph, its nodes and its edges."""

    graph: dict[str, str]
    node: dict[str, str]
    edge: dict[str, str]


def dot_value(value) -> str:
    """Convert a Python value to its DOT attribute spelling."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _merge(defaults: dict, overrides: dict | None) -> dict[str, str]:
    merged = dict(defaults)
    merged.update(overrides or {})
    return {key: dot_value(value) for key, value in merged.items() if value is not None}


def resolve_styles(config: GraphConfig) -> GraphStyles:
    """Resolve graph, node and edge attributes from a config.

    Entries of ``config.graphviz_options`` ("G", "N" and "E") are applied over
    the built-in defaults, so they always win for the same attribute key.

    Args:
        config: Rendering configuration.

    Returns:
        GraphStyles with every value already converted to a DOT string.
    """
    options = config.graphviz_options or {}

    graph = _merge(
        {
            "overlap": False,
            "pad": 0.3,
            "rankdir": config.rankdir,
            "layout": config.layout,
            "bgcolor": config.background_color,
        },
        options.get("G"),
    )
    edge = _merge({"color": config.edge_color}, options.get("E"))
    node = _merge(
        {
            "fontname": config.font_name,
            "fontsize": config.font_size,
            "color": config.node_color,
            "shape": config.node_shape,
            "style": config.node_style,
            "height": 0,
            "fontcolor": config.node_color,
        },
        options.get("N"),
    )
    return GraphStyles(graph=graph, node=node, edge=edge)


def node_highlight(
    dependencies: Sequence[str] | None,
    is_cyclic: bool,
    config: GraphConfig,
) -> str | None:
    """Return the highlight color for a node, or None for the default style.

    Rules are checked in order and the first match wins:

    1. no dependencies (empty list, or not a key of the mapping at all)
    2. member of a circular dependency
    """
    rules = [
        (not dependencies, config.no_dependency_color),
        (is_cyclic, config.cyclic_node_color),
    ]
    for matches, color in rules:
        if matches:
            return color
    return None
