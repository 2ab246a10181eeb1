"""Pytest fixtures for graph building tests."""

import pytest

from modgraph.config import GraphConfig


@pytest.fixture
def config() -> GraphConfig:
    """Default rendering configuration."""
    return GraphConfig()


@pytest.fixture
def simple_modules() -> tuple[dict[str, list[str]], list[list[str]]]:
    """A -> B, C -> A, B has no dependencies."""
    modules = {
        "A": ["B"],
        "B": [],
        "C": ["A"],
    }
    return modules, []


@pytest.fixture
def circular_modules() -> tuple[dict[str, list[str]], list[list[str]]]:
    """A -> B -> A."""
    modules = {
        "A": ["B"],
        "B": ["A"],
    }
    return modules, [["A", "B"]]


@pytest.fixture
def external_modules() -> tuple[dict[str, list[str]], list[list[str]]]:
    """Modules depending on packages that are never listed as keys."""
    modules = {
        "app.js": ["lib/util.js", "lodash"],
        "lib/util.js": ["lodash", "fs"],
    }
    return modules, []


@pytest.fixture
def grouped_modules() -> tuple[dict[str, list[str]], list[list[str]]]:
    """Modules spread over two directories with cross-directory edges."""
    modules = {
        "src/core/a.js": ["src/core/b.js", "src/ui/view.js"],
        "src/core/b.js": ["src/core/a.js"],
        "src/ui/view.js": ["src/ui/widget.js", "main.js"],
        "src/ui/widget.js": [],
        "main.js": ["src/core/a.js"],
    }
    circular = [["src/core/a.js", "src/core/b.js"]]
    return modules, circular


@pytest.fixture
def group_by_directory():
    """node_attributes callback: group by the directory part of the id."""

    def node_attributes(module: str) -> dict | None:
        if "/" not in module:
            return None
        return {"group": module.rsplit("/", 1)[0]}

    return node_attributes


class FakeProcess:
    """Stand-in for asyncio.subprocess.Process."""

    def __init__(self, returncode: int, stdout: bytes, stderr: bytes, inputs: list):
        self.returncode = returncode
        self._stdout = stdout
        self._stderr = stderr
        self._inputs = inputs

    async def communicate(self, input: bytes | None = None) -> tuple[bytes, bytes]:
        if input is not None:
            self._inputs.append(input)
        return self._stdout, self._stderr


class FakeDot:
    """Records dot invocations and returns canned output."""

    def __init__(self):
        self.calls: list[list[str]] = []
        self.inputs: list[bytes] = []
        self.missing = False
        self.version_returncode = 0
        self.returncode = 0
        self.stdout = b'<?xml version="1.0"?>\n<svg viewBox="0 0 10 10"></svg>\n'
        self.stderr = b""

    async def __call__(self, *cmd, **kwargs):
        if self.missing:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        self.calls.append(list(cmd))
        if cmd[1] == "-V":
            return FakeProcess(
                self.version_returncode, b"", b"dot - graphviz version 9.0.0", self.inputs
            )
        return FakeProcess(self.returncode, self.stdout, self.stderr, self.inputs)


@pytest.fixture
def fake_dot(monkeypatch) -> FakeDot:
    """Replace the Graphviz subprocess with a FakeDot."""
    fake = FakeDot()
    monkeypatch.setattr("asyncio.create_subprocess_exec", fake)
    return fake
