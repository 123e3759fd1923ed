"""Test configuration and fixtures for chromacheck tests."""

import numpy as np
import pytest

from chromacheck.color_utils import Color
from chromacheck.palette import Palette, PaletteLimits


@pytest.fixture
def default_hexes() -> list[str]:
    """The palette a new session starts with."""
    return ["#0f172a", "#f8fafc", "#3b82f6"]


@pytest.fixture
def palette(default_hexes) -> Palette:
    """A three color palette with fixed ids."""
    colors = tuple(
        Color(hex_str, f"c{i}") for i, hex_str in enumerate(default_hexes)
    )
    return Palette(colors, PaletteLimits())


@pytest.fixture
def invalid_hex_inputs() -> list[str]:
    """Strings that must fail hex normalization."""
    return [
        "red",
        "#12345",
        "#gggggg",
        "",
        "   ",
        "#1234567",
        "#ff00",
        "rgb(0, 0, 0)",
    ]


@pytest.fixture
def sample_hexes() -> list[str]:
    """Assorted valid colors for property style checks."""
    return [
        "#000000",
        "#ffffff",
        "#ff0000",
        "#00ff00",
        "#0000ff",
        "#777777",
        "#0f172a",
        "#f8fafc",
        "#3b82f6",
        "#10b981",
        "#f59e0b",
        "#ef4444",
        "#8b5cf6",
        "#050505",
    ]


@pytest.fixture(autouse=True)
def reset_random_seed():
    """Reset numpy random seed before each test for reproducibility."""
    np.random.seed(42)
