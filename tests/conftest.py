"""Shared test fixtures for ftee."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

EXAMPLE_TEMPLATE = """\
This is ignored
FTEE {out1}
This goes into out1 only.
FTEE {out2}
This goes into out2 only.
FTEE {out1} {out3}
This goes into out1 and out3.
"""


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for input and output files."""
    return tmp_path


@pytest.fixture
def write_input(tmp_dir: Path) -> Callable[..., Path]:
    """Factory fixture: write an input file and return its path."""

    def _factory(text: str, name: str = "input.txt", encoding: str = "utf-8") -> Path:
        path = tmp_dir / name
        path.write_bytes(text.encode(encoding))
        return path

    return _factory


@pytest.fixture
def example_input(tmp_dir: Path, write_input: Callable[..., Path]) -> Path:
    """The three-output example from the ftee help text, rooted in tmp_dir."""
    return write_input(
        EXAMPLE_TEMPLATE.format(
            out1=tmp_dir / "out1",
            out2=tmp_dir / "out2",
            out3=tmp_dir / "out3",
        ),
        name="example.txt",
    )


@pytest.fixture
def read_output() -> Callable[[Path], str]:
    """Read an output file without newline translation."""

    def _read(path: Path) -> str:
        return path.read_bytes().decode("utf-8")

    return _read
