"""
Lottie Builder - Color Model

Conversion between CSS-style hex strings (what accelerators and callers
use) and Lottie color arrays (normalized floats, optionally with alpha).
"""

from typing import List, Optional, Sequence


class Color:
    """RGBA color with uint8 storage.

    Internal storage: _r, _g, _b, _a (uint8 0-255)
    """

    def __init__(self, r: int, g: int, b: int, a: int = 255):
        """Direct construction from uint8 values (0-255), clamped."""
        self._r = max(0, min(255, int(r)))
        self._g = max(0, min(255, int(g)))
        self._b = max(0, min(255, int(b)))
        self._a = max(0, min(255, int(a)))

    @property
    def r(self) -> int:
        """Red component (0-255) - READ ONLY"""
        return self._r

    @property
    def g(self) -> int:
        """Green component (0-255) - READ ONLY"""
        return self._g

    @property
    def b(self) -> int:
        """Blue component (0-255) - READ ONLY"""
        return self._b

    @property
    def a(self) -> int:
        """Alpha component (0-255) - READ ONLY"""
        return self._a

    # ========================================
    # Output Methods
    # ========================================

    def to_lottie_rgb(self) -> List[float]:
        """Convert to Lottie RGB array [r, g, b] in 0-1 range."""
        return [self._r / 255.0, self._g / 255.0, self._b / 255.0]

    def to_lottie_rgba(self) -> List[float]:
        """Convert to Lottie RGBA array [r, g, b, a] in 0-1 range."""
        return [self._r / 255.0, self._g / 255.0, self._b / 255.0, self._a / 255.0]

    def to_hex(self, include_alpha: bool = False) -> str:
        """Convert to hex color string: #RRGGBB (or #RRGGBBAA)."""
        if include_alpha:
            return f"#{self._r:02X}{self._g:02X}{self._b:02X}{self._a:02X}"
        return f"#{self._r:02X}{self._g:02X}{self._b:02X}"

    # ========================================
    # Factory Methods
    # ========================================

    @staticmethod
    def from_hex(hex_string: str) -> Optional['Color']:
        """Parse #RGB, #RRGGBB or #RRGGBBAA (leading # optional).

        Returns:
            Color, or None if the string is not a valid hex color
        """
        if not isinstance(hex_string, str):
            return None

        hex_string = hex_string.strip().lstrip('#')
        if len(hex_string) == 3:
            hex_string = ''.join(c * 2 for c in hex_string)
        if len(hex_string) not in (6, 8):
            return None

        try:
            channels = [int(hex_string[i:i + 2], 16) for i in range(0, len(hex_string), 2)]
        except ValueError:
            return None
        return Color(*channels)

    @staticmethod
    def from_lottie(values: Sequence[float]) -> 'Color':
        """Create from a Lottie [r, g, b] or [r, g, b, a] array (0-1 floats)."""
        channels = [int(round(v * 255)) for v in values[:4]]
        return Color(*channels)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self._r, self._g, self._b, self._a) == (other._r, other._g, other._b, other._a)

    def __hash__(self) -> int:
        return hash((self._r, self._g, self._b, self._a))

    def __repr__(self) -> str:
        return f"Color(r={self._r}, g={self._g}, b={self._b}, a={self._a})"


def convert_to_lottie_color_rgb(hex_string: str) -> List[float]:
    """Hex string to Lottie RGB array.

    Raises:
        ValueError: If hex_string is not a valid hex color
    """
    color = Color.from_hex(hex_string)
    if color is None:
        raise ValueError(f"Invalid hex color: {hex_string!r}")
    return color.to_lottie_rgb()


def convert_to_lottie_color_rgba(hex_string: str) -> List[float]:
    """Hex string to Lottie RGBA array.

    Raises:
        ValueError: If hex_string is not a valid hex color
    """
    color = Color.from_hex(hex_string)
    if color is None:
        raise ValueError(f"Invalid hex color: {hex_string!r}")
    return color.to_lottie_rgba()
