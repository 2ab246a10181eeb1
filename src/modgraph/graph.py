"""Build a Graphviz-ready graph model from a module dependency mapping."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

import networkx as nx

from .config import GraphConfig
from .style import dot_value, node_highlight, resolve_styles


@dataclass
class Subgraph:
    """Named container for the nodes of one group and the edges between them."""

    name: str
    nodes: list[str] = field(default_factory=list)
    edges: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class GraphDescription:
    """A directed module graph with grouping and styling.

    Every node and edge lives in ``graph``; edge data records the subgraph
    the edge belongs to (None for the top level).
    """

    graph: nx.MultiDiGraph = field(default_factory=nx.MultiDiGraph)
    subgraphs: dict[str, Subgraph] = field(default_factory=dict)
    groups: dict[str, str] = field(default_factory=dict)  # node -> first-seen group
    graph_attr: dict[str, str] = field(default_factory=dict)
    node_attr: dict[str, str] = field(default_factory=dict)
    edge_attr: dict[str, str] = field(default_factory=dict)

    def nodes(self) -> list[str]:
        return list(self.graph.nodes)

    def placed_edges(self) -> list[tuple[str, str, str | None]]:
        """(source, target, subgraph) for every edge, in emission order."""
        # Edge keys are emission indices
        edges = sorted(self.graph.edges(keys=True, data="subgraph"), key=lambda e: e[2])
        return [(u, v, subgraph) for u, v, _, subgraph in edges]

    def edges(self) -> list[tuple[str, str]]:
        return [(u, v) for u, v, _ in self.placed_edges()]

    def top_level_edges(self) -> list[tuple[str, str]]:
        """Edges not contained in any subgraph."""
        return [(u, v) for u, v, subgraph in self.placed_edges() if subgraph is None]

    def node_attributes(self, node: str) -> dict[str, str]:
        return self.graph.nodes[node]

    def group_of(self, node: str) -> str | None:
        return self.groups.get(node)


def cyclic_modules(circular: Sequence[Sequence[str]]) -> set[str]:
    """Flatten a list of dependency cycles into the set of modules involved."""
    return {module for cycle in circular for module in cycle}


class _GraphBuilder:
    """Creates nodes and subgraphs lazily, at most once per identifier."""

    def __init__(self, config: GraphConfig):
        self.config = config
        styles = resolve_styles(config)
        self.description = GraphDescription(
            graph_attr=styles.graph,
            node_attr=styles.node,
            edge_attr=styles.edge,
        )

    def node(self, node_id: str) -> str:
        """Return the node for ``node_id``, creating it on first sight."""
        description = self.description
        if node_id in description.graph:
            return node_id

        attrs = None
        if self.config.node_attributes is not None:
            attrs = self.config.node_attributes(node_id)
        attrs = {key: dot_value(value) for key, value in (attrs or {}).items()}

        group = attrs.get("group")
        if group:
            description.groups[node_id] = group
            if group not in description.subgraphs:
                description.subgraphs[group] = Subgraph(name=group)
            description.subgraphs[group].nodes.append(node_id)

        description.graph.add_node(node_id, **attrs)
        return node_id

    def highlight(self, node_id: str, color: str | None) -> None:
        if color is None:
            return
        attrs = self.description.graph.nodes[node_id]
        attrs["color"] = color
        attrs["fontcolor"] = color

    def edge(self, source: str, target: str) -> None:
        description = self.description
        group = description.groups.get(source)
        if group is not None and group == description.groups.get(target):
            description.subgraphs[group].edges.append((source, target))
        else:
            group = None
        key = description.graph.number_of_edges()
        description.graph.add_edge(source, target, key=key, subgraph=group)


def build_graph(
    modules: Mapping[str, Sequence[str]],
    circular: Sequence[Sequence[str]],
    config: GraphConfig,
) -> GraphDescription:
    """Build the graph description for a dependency mapping.

    Modules are visited in mapping order and their dependencies in list
    order, which fixes the order nodes and edges are emitted in. A module
    with no dependencies, or one only ever seen as a dependency, is styled
    with ``no_dependency_color``; otherwise a module that is part of a cycle
    is styled with ``cyclic_node_color``.

    Group membership comes from ``config.node_attributes`` and is decided the
    first time an identifier is seen; later lookups never move a node. An
    edge is placed inside a subgraph only when both ends share its group.

    Args:
        modules: Mapping from module id to the ids it depends on.
        circular: Lists of module ids forming circular dependencies.
        config: Rendering configuration.

    Returns:
        A freshly built GraphDescription.
    """
    cyclic = cyclic_modules(circular)
    builder = _GraphBuilder(config)

    for module_id, dependencies in modules.items():
        builder.node(module_id)
        builder.highlight(
            module_id, node_highlight(dependencies, module_id in cyclic, config)
        )

        for dep_id in dependencies or ():
            builder.node(dep_id)
            # Dependencies that are not keys themselves are leaves
            if dep_id not in modules:
                builder.highlight(dep_id, node_highlight(None, False, config))
            builder.edge(module_id, dep_id)

    return builder.description
