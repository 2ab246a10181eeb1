"""CLI for modgraph."""

import argparse
import asyncio
import json
import sys
from pathlib import Path

import networkx as nx

from . import output
from .config import GraphConfig, NodeAttributes, load_config
from .render import GraphvizError


def load_input(input_path: Path) -> tuple[dict[str, list[str]], list[list[str]] | None]:
    """Load a dependency mapping (and optional cycle list) from JSON.

    The file holds either a bare ``{module: [deps, ...]}`` mapping or an
    object with "modules" and optional "circular" keys.

    Args:
        input_path: Path to the JSON file.

    Returns:
        Tuple of (modules, circular); circular is None if the file has none.

    Raises:
        ValueError: If the JSON does not have one of the accepted shapes.
    """
    with open(input_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{input_path}: expected a JSON object")

    if "modules" in data:
        modules = data["modules"]
        circular = data.get("circular")
    else:
        modules = data
        circular = None

    if not isinstance(modules, dict):
        raise ValueError(f'{input_path}: "modules" must be a JSON object')
    for module, deps in modules.items():
        if not isinstance(deps, list):
            raise ValueError(f"{input_path}: dependencies of {module!r} must be a list")

    if circular is not None:
        if not isinstance(circular, list) or not all(
            isinstance(cycle, list) and all(isinstance(module, str) for module in cycle)
            for cycle in circular
        ):
            raise ValueError(f'{input_path}: "circular" must be a list of lists of module ids')
    return modules, circular


def find_cycles(modules: dict[str, list[str]]) -> list[list[str]]:
    """Find circular dependencies in a mapping using networkx.

    Args:
        modules: Mapping from module id to the ids it depends on.

    Returns:
        Each elementary cycle as a list of module ids, in a stable order.
    """
    G = nx.DiGraph()
    for module, deps in modules.items():
        G.add_node(module)
        for dep in deps:
            G.add_edge(module, dep)
    return sorted(nx.simple_cycles(G))


def group_by_path(depth: int) -> NodeAttributes:
    """Return a node_attributes callback grouping modules by path prefix.

    ``src/core/a.js`` with depth 2 belongs to group ``src/core``. Modules with
    no more than ``depth`` path components are left ungrouped.
    """

    def node_attributes(module: str) -> dict | None:
        parts = module.split("/")
        if len(parts) <= depth:
            return None
        return {"group": "/".join(parts[:depth])}

    return node_attributes


def build_config(args: argparse.Namespace) -> GraphConfig:
    """Layer CLI flags over the config file over the defaults."""
    values = load_config(args.config) if args.config else {}
    config = GraphConfig.from_dict(values)
    if args.rankdir:
        config.rankdir = args.rankdir
    if args.layout:
        config.layout = args.layout
    if args.graphviz_path:
        config.graphviz_path = args.graphviz_path
    if args.group_depth:
        config.node_attributes = group_by_path(args.group_depth)
    return config


async def run(args: argparse.Namespace, config: GraphConfig) -> None:
    """Produce the requested output."""
    modules, circular = load_input(args.input)
    print(f"Loaded {len(modules)} modules from {args.input}", file=sys.stderr)

    if circular is None:
        circular = find_cycles(modules) if args.circular else []
    if circular:
        print(f"Found {len(circular)} circular dependencies", file=sys.stderr)

    if args.image:
        path = await output.image(modules, circular, args.image, config)
        print(f"Wrote {path}")
    elif args.svg:
        data = await output.svg(modules, circular, config)
        await asyncio.to_thread(args.svg.write_bytes, data)
        print(f"Wrote {args.svg.resolve()}")
    elif args.interactive:
        path = await output.interactive(modules, circular, args.interactive, config)
        print(f"Wrote {path}")
    else:
        print(await output.dot(modules, circular, config))


def main(argv: list[str] | None = None) -> None:
    """Main entry point for modgraph CLI."""
    parser = argparse.ArgumentParser(
        description="Render a module dependency graph with Graphviz"
    )
    parser.add_argument(
        "input",
        type=Path,
        help='JSON dependency mapping, or {"modules": ..., "circular": ...}',
    )
    parser.add_argument("--config", type=Path, help="Path to YAML config file")

    outputs = parser.add_mutually_exclusive_group()
    outputs.add_argument("--image", type=Path, help="Write an image (format from extension)")
    outputs.add_argument("--svg", type=Path, help="Write SVG to this path")
    outputs.add_argument("--interactive", type=Path, help="Write an interactive HTML page")
    outputs.add_argument(
        "--dot",
        action="store_true",
        help="Print DOT to stdout (default when no other output is given)",
    )

    parser.add_argument(
        "--circular",
        action="store_true",
        help="Detect circular dependencies when the input does not list them",
    )
    parser.add_argument(
        "--group-depth",
        type=int,
        metavar="N",
        help="Group modules by their first N path components",
    )
    parser.add_argument("--rankdir", choices=["LR", "RL", "TB", "BT"], help="Layout direction")
    parser.add_argument("--layout", type=str, help="Graphviz layout engine (default: dot)")
    parser.add_argument(
        "--graphviz-path",
        type=str,
        help="Directory containing the Graphviz dot executable",
    )

    args = parser.parse_args(argv)

    if args.group_depth is not None and args.group_depth < 1:
        parser.error("--group-depth must be at least 1")

    try:
        config = build_config(args)
        asyncio.run(run(args, config))
    except (GraphvizError, ValueError, OSError) as err:
        print(f"Error: {err}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
