"""Shared pytest fixtures for all test modules."""

from pathlib import Path
from typing import Callable, Iterable

import pytest

from tests.fixtures.region_generator import RegionGenerator


@pytest.fixture
def write_interval_file(tmp_path) -> Callable[..., Path]:
    """Write lines to a file in a temporary directory and return its path."""

    def _write(lines: Iterable[str], name: str = "intervals.bed", newline: str = "\n") -> Path:
        path = tmp_path / name
        with open(path, "w", encoding="utf-8", newline="") as f:
            for line in lines:
                f.write(line + newline)
        return path

    return _write


@pytest.fixture
def region_generator() -> RegionGenerator:
    """BED line generator with the default column layout."""
    return RegionGenerator()


@pytest.fixture
def four_peaks() -> list:
    """Four BED peaks on four chromosomes with p-values averaging 0.027775."""
    return [
        "chr1\t10\t20\tGeUtilities_00\t0.01",
        "chr2\t30\t40\tGeUtilities_01\t0.1",
        "chr3\t50\t60\tGeUtilities_02\t0.001",
        "chr4\t70\t80\tGeUtilities_03\t0.0001",
    ]
