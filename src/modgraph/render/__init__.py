"""Render pipeline: DOT serialization, the Graphviz subprocess and HTML output."""

from .dot import to_agraph, to_dot
from .engine import (
    DEFAULT_IMAGE_FORMAT,
    EngineExecutionError,
    EngineUnavailable,
    GraphvizError,
    check_graphviz_installed,
    dot_command,
    image_format,
    render,
    run_engine,
)
from .interactive import generate_interactive_html

__all__ = [
    "to_agraph",
    "to_dot",
    "DEFAULT_IMAGE_FORMAT",
    "GraphvizError",
    "EngineUnavailable",
    "EngineExecutionError",
    "check_graphviz_installed",
    "dot_command",
    "image_format",
    "render",
    "run_engine",
    "generate_interactive_html",
]
