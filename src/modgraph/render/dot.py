"""Serialize a GraphDescription to DOT via pygraphviz."""

import pygraphviz as pgv

from ..graph import GraphDescription


def to_agraph(description: GraphDescription) -> pgv.AGraph:
    """Convert a GraphDescription to a pygraphviz AGraph.

    Nodes and edges of a group are added through that group's subgraph, so
    the DOT output nests them in a ``subgraph <group> { ... }`` block.

    Args:
        description: Graph built by build_graph.

    Returns:
        Non-strict directed AGraph (self-loops and repeated edges are kept).
    """
    agraph = pgv.AGraph(name="G", directed=True, strict=False)
    agraph.graph_attr.update(description.graph_attr)
    agraph.node_attr.update(description.node_attr)
    agraph.edge_attr.update(description.edge_attr)

    subgraphs = {
        name: agraph.add_subgraph(name=name) for name in description.subgraphs
    }

    for node, attrs in description.graph.nodes(data=True):
        group = description.groups.get(node)
        target = subgraphs[group] if group else agraph
        target.add_node(node, **attrs)

    for source, dest, group in description.placed_edges():
        target = subgraphs[group] if group else agraph
        target.add_edge(source, dest)

    return agraph


def to_dot(description: GraphDescription) -> str:
    """Return the DOT source for a GraphDescription."""
    return to_agraph(description).string()
