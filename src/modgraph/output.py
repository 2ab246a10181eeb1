"""Generate SVG, image, DOT and interactive HTML outputs."""

import asyncio
from collections.abc import Mapping, Sequence
from pathlib import Path

from .config import GraphConfig
from .graph import build_graph
from .render import check_graphviz_installed, generate_interactive_html, image_format, render

Modules = Mapping[str, Sequence[str]]
Circular = Sequence[Sequence[str]]


async def _render(
    modules: Modules,
    circular: Circular,
    config: GraphConfig,
    output_format: str,
) -> bytes:
    await check_graphviz_installed(config)
    description = build_graph(modules, circular, config)
    return await render(description, output_format, config)


async def svg(modules: Modules, circular: Circular, config: GraphConfig) -> bytes:
    """Return the dependency graph as SVG bytes."""
    return await _render(modules, circular, config, "svg")


async def image(
    modules: Modules,
    circular: Circular,
    image_path: str | Path,
    config: GraphConfig,
) -> Path:
    """Render the dependency graph to an image file.

    The format is taken from the file extension (``png`` if there is none).

    Args:
        modules: Mapping from module id to the ids it depends on.
        circular: Lists of module ids forming circular dependencies.
        image_path: Destination file.
        config: Rendering configuration.

    Returns:
        Absolute path of the written file.
    """
    image_path = Path(image_path)
    data = await _render(modules, circular, config, image_format(image_path))
    await asyncio.to_thread(image_path.write_bytes, data)
    return image_path.resolve()


async def dot(modules: Modules, circular: Circular, config: GraphConfig) -> str:
    """Return the dependency graph as laid-out DOT text."""
    output = await _render(modules, circular, config, "dot")
    return output.decode("utf-8")


async def interactive(
    modules: Modules,
    circular: Circular,
    page_path: str | Path,
    config: GraphConfig,
) -> Path:
    """Write an interactive HTML page for the dependency graph.

    Returns:
        Absolute path of the written page.
    """
    page_path = Path(page_path)
    page = generate_interactive_html(await svg(modules, circular, config))
    await asyncio.to_thread(page_path.write_bytes, page)
    return page_path.resolve()
