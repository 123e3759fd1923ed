"""WCAG 2.1 and APCA contrast scoring for text/background color pairs.

This module implements the two contrast models chromacheck reports for every
pair of palette colors:

    - WCAG 2.1 contrast ratio: symmetric, range [1, 21], thresholds 3 / 4.5 / 7.
    - APCA lightness contrast (Lc), 0.0.98G constants: asymmetric, signed,
      thresholds 45 / 60 / 75 applied to the magnitude.

Scores are never rounded before classification. A ratio of 4.4999 is
"AA Large", not "AA", even though it displays as 4.50:1. Rounding happens only
in :func:`format_ratio` and :func:`format_lc`.

Example:
    >>> from chromacheck.contrast import evaluate_pair
    >>> result = evaluate_pair("#000000", "#ffffff")
    >>> result.wcag_ratio, result.wcag_tier.value
    (21.0, 'AAA')
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .color_utils import Color, decode_to_linear_channels

__all__ = [
    "ContrastResult",
    "Tier",
    "apca_contrast",
    "apca_luminance",
    "apca_tier",
    "contrast_ratio",
    "evaluate_pair",
    "format_lc",
    "format_ratio",
    "relative_luminance",
    "wcag_tier",
]

ColorLike = Union[str, Color]
RGB = tuple[float, float, float]


class Tier(str, Enum):
    """Compliance tier. Values are the user facing labels."""

    AAA = "AAA"
    AA = "AA"
    AA_LARGE = "AA Large"
    FAIL = "Fail"


WCAG_THRESHOLDS = ((7.0, Tier.AAA), (4.5, Tier.AA), (3.0, Tier.AA_LARGE))
APCA_THRESHOLDS = ((75.0, Tier.AAA), (60.0, Tier.AA), (45.0, Tier.AA_LARGE))

_APCA_EXPONENT = 2.4
_APCA_SRGB_COEFFICIENTS = (0.2126729, 0.7151522, 0.072175)

_APCA_BLACK_THRESHOLD = 0.022
_APCA_BLACK_CLIP = 1.414
_APCA_DELTA_Y_MIN = 0.0005

_APCA_BoW_TEXT = 0.57
_APCA_BoW_BACKGROUND = 0.56
_APCA_WoB_TEXT = 0.62
_APCA_WoB_BACKGROUND = 0.65

_APCA_SCALE = 1.14
_APCA_CLAMP = 0.1


def _to_rgb(color: ColorLike) -> RGB:
    if isinstance(color, Color):
        return color.rgb
    return decode_to_linear_channels(color)


def _classify(score: float, thresholds: tuple[tuple[float, Tier], ...]) -> Tier:
    for minimum, tier in thresholds:
        if score >= minimum:
            return tier
    return Tier.FAIL


# WCAG 2.1


def relative_luminance(rgb: RGB) -> float:
    """Compute the WCAG 2.1 relative luminance of an sRGB color.

    Args:
        rgb: (red, green, blue) components in [0, 1].

    Returns:
        float: Luminance in [0, 1]. Black is 0.0, white is 1.0.

    Each channel is linearized with the sRGB transfer function
    (``c / 12.92`` below 0.03928, ``((c + 0.055) / 1.055) ** 2.4`` above) and
    the channels are weighted 0.2126 / 0.7152 / 0.0722.

    References:
        https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
    """
    def linearize(c: float) -> float:
        if c <= 0.03928:
            return c / 12.92
        return ((c + 0.055) / 1.055) ** 2.4

    r, g, b = rgb
    r_lin = linearize(r)
    g_lin = linearize(g)
    b_lin = linearize(b)
    return 0.2126 * r_lin + 0.7152 * g_lin + 0.0722 * b_lin


def contrast_ratio(text: ColorLike, background: ColorLike) -> float:
    """Calculate the WCAG 2.1 contrast ratio between two colors.

    The ratio is ``(L_lighter + 0.05) / (L_darker + 0.05)``, so it does not
    depend on which color is the text. Identical colors give exactly 1.0,
    black against white exactly 21.0. The value is not rounded.

    References:
        https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    l1 = relative_luminance(_to_rgb(text))
    l2 = relative_luminance(_to_rgb(background))
    light = max(l1, l2)
    dark = min(l1, l2)
    return (light + 0.05) / (dark + 0.05)


def wcag_tier(ratio: float) -> Tier:
    """Classify an unrounded WCAG ratio. Lower bounds are inclusive."""
    return _classify(ratio, WCAG_THRESHOLDS)


# APCA


def apca_luminance(rgb: RGB) -> float:
    """Determine the APCA screen luminance Y for an sRGB color.

    Not the WCAG relative luminance: APCA uses a plain 2.4 power curve and
    slightly different coefficients.
    """
    return math.fsum(
        math.pow(c, _APCA_EXPONENT) * k for c, k in zip(rgb, _APCA_SRGB_COEFFICIENTS)
    )


def _soft_clamp_black(y: float) -> float:
    if y < _APCA_BLACK_THRESHOLD:
        y += math.pow(_APCA_BLACK_THRESHOLD - y, _APCA_BLACK_CLIP)
    return y


def apca_contrast(text: ColorLike, background: ColorLike) -> float:
    """
    Compute the signed APCA Lc of text on background.

    APCA is asymmetric: swapping text and background changes both magnitude
    and sign. Dark text on a lighter background gives a positive Lc, light
    text on a darker background a negative one. Small luminance differences
    and small contrasts clamp to exactly 0.0.
    """
    y_text = _soft_clamp_black(apca_luminance(_to_rgb(text)))
    y_bg = _soft_clamp_black(apca_luminance(_to_rgb(background)))

    if abs(y_bg - y_text) < _APCA_DELTA_Y_MIN:
        return 0.0

    if y_bg > y_text:
        sapc = (
            math.pow(y_bg, _APCA_BoW_BACKGROUND) - math.pow(y_text, _APCA_BoW_TEXT)
        ) * _APCA_SCALE
        if sapc < _APCA_CLAMP:
            return 0.0
        return sapc * 100

    sapc = (
        math.pow(y_bg, _APCA_WoB_BACKGROUND) - math.pow(y_text, _APCA_WoB_TEXT)
    ) * _APCA_SCALE
    if sapc > -_APCA_CLAMP:
        return 0.0
    return sapc * 100


def apca_tier(lc: float) -> Tier:
    """Classify an unrounded Lc by its magnitude. Lower bounds are inclusive."""
    return _classify(abs(lc), APCA_THRESHOLDS)


# Results


@dataclass(frozen=True)
class ContrastResult:
    """Both contrast scores for one ordered (text, background) pair."""

    wcag_ratio: float
    wcag_tier: Tier
    apca_lc: float
    apca_tier: Tier

    def as_dict(self) -> dict[str, object]:
        return {
            "wcag_ratio": round(self.wcag_ratio, 2),
            "wcag_tier": self.wcag_tier.value,
            "apca_lc": round(self.apca_lc, 1),
            "apca_tier": self.apca_tier.value,
        }


def evaluate_pair(text: ColorLike, background: ColorLike) -> ContrastResult:
    """Score text on background with both WCAG 2.1 and APCA."""
    ratio = contrast_ratio(text, background)
    lc = apca_contrast(text, background)
    return ContrastResult(
        wcag_ratio=ratio,
        wcag_tier=wcag_tier(ratio),
        apca_lc=lc,
        apca_tier=apca_tier(lc),
    )


def format_ratio(ratio: float) -> str:
    return f"{ratio:.2f}:1"


def format_lc(lc: float) -> str:
    """Format Lc with one decimal and an explicit '+' on positive scores."""
    if lc > 0:
        return f"+{lc:.1f}"
    return f"{lc:.1f}"
