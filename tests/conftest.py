"""
Test configuration and shared fixtures for simple_masonry.

This module defines reusable pytest fixtures for building dimensions,
resolved options, image files, and TOML layout files.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import tomlkit
from PIL import Image

from simple_masonry.config import ResolvedOptions, resolve_options
from simple_masonry.logging_utils import logger
from simple_masonry.type_defs import Dimension


@pytest.fixture
def test_dir() -> Generator[str, None, None]:
    """Provides a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def make_dimensions() -> Callable[..., list[Dimension]]:
    """Factory for ``count`` identical dimensions tagged with their order."""

    def _build(count: int, width: float, height: float) -> list[Dimension]:
        return [
            Dimension(width=width, height=height, order=i)
            for i in range(count)
        ]

    return _build


@pytest.fixture
def varied_dimensions() -> list[Dimension]:
    """Deterministic mix of portrait, landscape, and square items."""
    return [
        Dimension(width=(i * 37) % 170 + 30, height=(i * 53) % 190 + 20)
        for i in range(1, 24)
    ]


@pytest.fixture
def make_resolved() -> Callable[..., ResolvedOptions]:
    """Build ResolvedOptions from keyword options."""

    def _build(**options: Any) -> ResolvedOptions:
        return resolve_options(options)

    return _build


@pytest.fixture
def make_image(test_dir: str) -> Callable[..., Path]:
    """Create and save an RGB image of the given size."""

    def _make(name: str, size: tuple[int, int], **save_kwargs: Any) -> Path:
        path = Path(test_dir) / name
        Image.new("RGB", size, color="blue").save(path, **save_kwargs)
        return path

    return _make


@pytest.fixture
def write_layout_toml(test_dir: str) -> Callable[[dict[str, Any]], Path]:
    """Write layout options to a TOML file and return its path."""

    def _write(data: dict[str, Any]) -> Path:
        doc = tomlkit.document()
        doc.update(data)
        path = Path(test_dir) / "layout.toml"
        path.write_text(tomlkit.dumps(doc), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the package logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)
    monkeypatch.setattr(logger, "level", logger.level)
