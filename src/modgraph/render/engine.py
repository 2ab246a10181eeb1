"""Run the Graphviz dot executable."""

import asyncio
import os
from pathlib import Path

from ..config import GraphConfig
from ..graph import GraphDescription
from .dot import to_dot

DEFAULT_IMAGE_FORMAT = "png"


class GraphvizError(RuntimeError):
    """Base class for failures of the Graphviz layout engine."""


class EngineUnavailable(GraphvizError):
    """The dot executable could not be found."""


class EngineExecutionError(GraphvizError):
    """dot ran but failed or rejected its input."""

    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr


def dot_command(graphviz_path: str | None = None) -> str:
    """Return the dot executable, optionally inside an alternate install directory."""
    return os.path.join(graphviz_path, "dot") if graphviz_path else "dot"


def image_format(image_path: str | Path) -> str:
    """Infer the Graphviz output format from a file extension.

    Args:
        image_path: Destination path, e.g. ``graph.svg``.

    Returns:
        The extension without its dot, or DEFAULT_IMAGE_FORMAT if there is none.
    """
    suffix = Path(image_path).suffix
    return suffix[1:].lower() if suffix else DEFAULT_IMAGE_FORMAT


async def check_graphviz_installed(config: GraphConfig) -> None:
    """Check that dot can be executed.

    Raises:
        EngineUnavailable: If the executable is not found.
        EngineExecutionError: If running ``dot -V`` fails for any other reason.
    """
    cmd = dot_command(config.graphviz_path)
    try:
        proc = await asyncio.create_subprocess_exec(
            cmd,
            "-V",
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        _, stderr = await proc.communicate()
    except FileNotFoundError as err:
        raise EngineUnavailable(
            f'Graphviz could not be found. Ensure that "{cmd}" is in your $PATH. {err}'
        ) from err
    except OSError as err:
        raise EngineExecutionError(f'Unexpected error when calling Graphviz "{cmd}". {err}') from err

    if proc.returncode != 0:
        message = stderr.decode(errors="replace").strip()
        raise EngineExecutionError(
            f'Unexpected error when calling Graphviz "{cmd}". {message}', stderr=message
        )


async def run_engine(
    dot_source: str,
    output_format: str,
    graphviz_path: str | None = None,
) -> bytes:
    """Lay out DOT source with dot and return everything it writes to stdout.

    Args:
        dot_source: Graph in DOT syntax.
        output_format: Graphviz output format (``svg``, ``dot``, ``png``, ...).
        graphviz_path: Optional directory containing the dot executable.

    Returns:
        Raw output bytes.

    Raises:
        EngineUnavailable: If the executable is not found.
        EngineExecutionError: If dot exits with a non-zero status.
    """
    cmd = dot_command(graphviz_path)
    try:
        proc = await asyncio.create_subprocess_exec(
            cmd,
            f"-T{output_format}",
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as err:
        raise EngineUnavailable(
            f'Graphviz could not be found. Ensure that "{cmd}" is in your $PATH. {err}'
        ) from err

    stdout, stderr = await proc.communicate(dot_source.encode())
    if proc.returncode != 0:
        message = stderr.decode(errors="replace").strip()
        raise EngineExecutionError(
            f"{cmd} -T{output_format} exited with status {proc.returncode}: {message}",
            stderr=message,
        )
    return stdout


async def render(
    description: GraphDescription,
    output_format: str,
    config: GraphConfig,
) -> bytes:
    """Serialize a graph description and render it with dot."""
    return await run_engine(to_dot(description), output_format, config.graphviz_path)
