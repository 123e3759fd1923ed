"""Color vision deficiency preview for rendered swatches.

Simulated colors are for display only. Contrast is always scored on the
original palette colors.
"""

import colour
import numpy as np

from .color_utils import decode_to_linear_channels, normalize_color

__all__ = ["SIMULATION_TYPES", "simulate_hex", "simulate_rgb"]

SIMULATION_TYPES: tuple[str, ...] = (
    "none",
    "protanopia",
    "deuteranopia",
    "tritanopia",
    "achromatopsia",
)

# Machado (2009) anomaly names; severity 1.0 is the dichromat case.
_MACHADO_DEFICIENCIES = {
    "protanopia": "Protanomaly",
    "deuteranopia": "Deuteranomaly",
    "tritanopia": "Tritanomaly",
}

_LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


def simulate_rgb(
    rgb: tuple[float, float, float], kind: str
) -> tuple[float, float, float]:
    """Simulate how an sRGB color in [0, 1] looks under a deficiency."""
    if kind not in SIMULATION_TYPES:
        raise ValueError(
            f"Unknown simulation '{kind}'. Options: {', '.join(SIMULATION_TYPES)}"
        )
    if kind == "none":
        return rgb

    linear = colour.cctf_decoding(np.array(rgb, dtype=float), function="sRGB")
    if kind == "achromatopsia":
        simulated = np.full(3, float(np.dot(_LUMINANCE_WEIGHTS, linear)))
    else:
        matrix = colour.blindness.matrix_cvd_Machado2009(
            _MACHADO_DEFICIENCIES[kind], 1.0
        )
        simulated = np.dot(matrix, linear)

    encoded = colour.cctf_encoding(np.clip(simulated, 0.0, 1.0), function="sRGB")
    r, g, b = (float(c) for c in np.clip(encoded, 0.0, 1.0))
    return (r, g, b)


def simulate_hex(hex_str: str, kind: str) -> str:
    """Return the lowercase #rrggbb color hex_str appears as under kind."""
    hex_str = normalize_color(hex_str)
    if kind == "none":
        return hex_str
    r, g, b = simulate_rgb(decode_to_linear_channels(hex_str), kind)
    return "#{:02x}{:02x}{:02x}".format(
        int(round(r * 255)), int(round(g * 255)), int(round(b * 255))
    )
