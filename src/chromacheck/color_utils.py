"""Hex color parsing and formatting utilities for chromacheck."""

import re
import uuid
from dataclasses import dataclass, field

__all__ = [
    "HEX_PATTERN",
    "Color",
    "InvalidFormatError",
    "decode_to_linear_channels",
    "expand_hex",
    "format_hex_display",
    "normalize_color",
    "validate_hex",
]

HEX_PATTERN = re.compile(r"^#([0-9a-f]{6}|[0-9a-f]{3})$", re.IGNORECASE)


class InvalidFormatError(ValueError):
    """Raised when a string is not a #RGB or #RRGGBB hex color."""

    def __init__(self, raw: str) -> None:
        super().__init__(
            f"Invalid hex color: '{raw}'. Supported formats: #RGB, #RRGGBB"
        )
        self.raw = raw


def _with_hash(raw: str) -> str:
    raw = raw.strip()
    if not raw.startswith("#"):
        raw = "#" + raw
    return raw


def validate_hex(raw: str) -> bool:
    """Check whether raw is a 3- or 6-digit hex color, '#' optional."""
    return HEX_PATTERN.match(_with_hash(raw)) is not None


def expand_hex(hex_str: str) -> str:
    """Expand #abc shorthand to #aabbcc."""
    if len(hex_str) == 4:
        return "#" + "".join(c * 2 for c in hex_str[1:])
    return hex_str


def normalize_color(raw: str) -> str:
    """Return the canonical lowercase #rrggbb form of raw.

    Raises:
        InvalidFormatError: raw does not match the hex pattern.
    """
    candidate = _with_hash(raw)
    if HEX_PATTERN.match(candidate) is None:
        raise InvalidFormatError(raw)
    return expand_hex(candidate).lower()


def decode_to_linear_channels(hex_str: str) -> tuple[float, float, float]:
    """Decode a hex color into (r, g, b) components in [0, 1].

    Invalid input decodes to black, (0.0, 0.0, 0.0), instead of raising:
    colors are validated before they get here.
    """
    if not validate_hex(hex_str):
        return (0.0, 0.0, 0.0)

    hex_str = expand_hex(_with_hash(hex_str))
    r = int(hex_str[1:3], 16) / 255.0
    g = int(hex_str[3:5], 16) / 255.0
    b = int(hex_str[5:7], 16) / 255.0
    return (r, g, b)


def format_hex_display(hex_str: str) -> str:
    """Format a hex color for display (#0F172A)."""
    return hex_str.upper()


def _new_id() -> str:
    return uuid.uuid4().hex[:8]


@dataclass(frozen=True)
class Color:
    """A palette entry: an id used for tracking plus a canonical hex value."""

    hex: str
    id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        # Invalid values are kept as given so palette evaluation can reject them.
        if validate_hex(self.hex):
            object.__setattr__(self, "hex", normalize_color(self.hex))

    @classmethod
    def from_input(cls, raw: str, id: str | None = None) -> "Color":
        hex_str = normalize_color(raw)
        if id is None:
            return cls(hex_str)
        return cls(hex_str, id)

    @property
    def display(self) -> str:
        return format_hex_display(self.hex)

    @property
    def rgb(self) -> tuple[float, float, float]:
        return decode_to_linear_channels(self.hex)
