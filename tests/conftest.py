"""Test configuration ensuring the local package is importable."""

from __future__ import annotations

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

path_str = str(SRC)
if path_str not in sys.path:
    sys.path.insert(0, path_str)


@pytest.fixture
def corpus() -> list[str]:
    # two garbage documents followed by two real ones
    return ["", "...!", "a a b", "a b b b"]


@pytest.fixture
def danish() -> list[str]:
    return [
        "",
        "...!",
        "Jeg har fri i dag.",
        "Dagen i dag er en rigtig god dag.",
        "Gode minder har vi heldigvis mange af.",
    ]
