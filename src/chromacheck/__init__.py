"""ChromaCheck - WCAG 2.1 and APCA contrast for every pair of palette colors"""

__version__ = "0.1.0"

from .color_utils import Color, InvalidFormatError, normalize_color, validate_hex
from .contrast import ContrastResult, Tier, evaluate_pair
from .palette import (
    FilterState,
    PaletteLimits,
    enumerate_pairs,
    evaluate_palette,
    is_visible,
)

__all__ = [
    "Color",
    "ContrastResult",
    "FilterState",
    "InvalidFormatError",
    "PaletteLimits",
    "Tier",
    "enumerate_pairs",
    "evaluate_pair",
    "evaluate_palette",
    "is_visible",
    "normalize_color",
    "validate_hex",
]
