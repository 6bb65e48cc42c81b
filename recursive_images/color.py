"""Immutable HSLA color value.

:class:`Color` stores hue in degrees and saturation / lightness / alpha as
0-1 ratios. Channels are normalized on construction (hue wraps modulo 360,
the rest are clamped) so every transformation is a total function: it never
raises, it returns a new in-range ``Color``.

Examples
--------
>>> from recursive_images.color import ROYAL_BLUE
>>> ROYAL_BLUE.spin(15).hue  # doctest: +ELLIPSIS
240.0...
>>> ROYAL_BLUE.fade_out_by(0.25).alpha
0.75
"""

import colorsys
from dataclasses import dataclass, replace
from typing import Dict, Tuple

from PIL import ImageColor

from recursive_images.types import Degrees, Normalized
from recursive_images.utils.units import degrees, normalized


RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Color:
    """HSLA color.

    Attributes:
        hue: Angle on the color wheel, wrapped into ``[0, 360)``.
        saturation: Colorfulness in ``[0, 1]``.
        lightness: ``0`` is black, ``1`` is white, ``0.5`` is the pure hue.
        alpha: Opacity in ``[0, 1]``; ``1`` is fully opaque.
    """

    hue: Degrees
    saturation: Normalized
    lightness: Normalized
    alpha: Normalized = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "hue", degrees(self.hue))
        object.__setattr__(self, "saturation", normalized(self.saturation))
        object.__setattr__(self, "lightness", normalized(self.lightness))
        object.__setattr__(self, "alpha", normalized(self.alpha))

    # -------- Construction --------

    @classmethod
    def hsl(
        cls,
        hue: Degrees,
        saturation: Normalized,
        lightness: Normalized,
        alpha: Normalized = 1.0,
    ) -> "Color":
        """Build a color from hue (degrees) and 0-1 channels."""
        return cls(hue, saturation, lightness, alpha)

    @classmethod
    def rgb(cls, r: int, g: int, b: int, alpha: Normalized = 1.0) -> "Color":
        """Build a color from 0-255 RGB channels."""
        h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
        return cls(h * 360.0, s, l, alpha)

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Build a color from a CSS name or hex string (``"royalblue"``, ``"#f00"``).

        Raises:
            ValueError: If Pillow does not recognise ``text``.
        """
        channels = ImageColor.getrgb(text)
        r, g, b = channels[:3]
        alpha = channels[3] / 255.0 if len(channels) == 4 else 1.0
        return cls.rgb(r, g, b, alpha)

    # -------- Transformations --------

    def spin(self, angle: Degrees) -> "Color":
        """Rotate the hue by ``angle`` degrees."""
        return replace(self, hue=self.hue + angle)

    def fade_out_by(self, amount: Normalized) -> "Color":
        """Lower opacity by ``amount``."""
        return replace(self, alpha=self.alpha - amount)

    def fade_in_by(self, amount: Normalized) -> "Color":
        """Raise opacity by ``amount``."""
        return replace(self, alpha=self.alpha + amount)

    def saturate_by(self, amount: Normalized) -> "Color":
        """Raise saturation by ``amount`` (clamped)."""
        return replace(self, saturation=self.saturation + amount)

    def desaturate_by(self, amount: Normalized) -> "Color":
        """Lower saturation by ``amount`` (clamped)."""
        return replace(self, saturation=self.saturation - amount)

    def lighten_by(self, amount: Normalized) -> "Color":
        """Raise lightness by ``amount`` (clamped)."""
        return replace(self, lightness=self.lightness + amount)

    def darken_by(self, amount: Normalized) -> "Color":
        """Lower lightness by ``amount`` (clamped)."""
        return replace(self, lightness=self.lightness - amount)

    def with_alpha(self, alpha: Normalized) -> "Color":
        """Replace opacity; values outside ``[0, 1]`` are clamped."""
        return replace(self, alpha=alpha)

    # -------- Conversion --------

    def to_rgb(self) -> RGB:
        """Return 0-255 RGB channels (alpha dropped)."""
        r, g, b = colorsys.hls_to_rgb(
            self.hue / 360.0, self.lightness, self.saturation
        )
        return round(r * 255), round(g * 255), round(b * 255)

    def to_rgba(self) -> RGBA:
        """Return 0-255 RGBA channels."""
        return (*self.to_rgb(), round(self.alpha * 255))


BLACK = Color.rgb(0, 0, 0)
WHITE = Color.rgb(255, 255, 255)
RED = Color.rgb(255, 0, 0)
GREEN = Color.rgb(0, 128, 0)
BLUE = Color.rgb(0, 0, 255)
ROYAL_BLUE = Color.rgb(65, 105, 225)
DARK_BLUE = Color.rgb(0, 0, 139)
CRIMSON = Color.rgb(220, 20, 60)
PALE_GOLDENROD = Color.rgb(238, 232, 170)
TRANSPARENT = BLACK.with_alpha(0.0)

NAMED_COLORS: Dict[str, Color] = {
    "black": BLACK,
    "white": WHITE,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "royal_blue": ROYAL_BLUE,
    "dark_blue": DARK_BLUE,
    "crimson": CRIMSON,
    "pale_goldenrod": PALE_GOLDENROD,
    "transparent": TRANSPARENT,
}
"""Name → color mapping for the colors used by the chapter examples."""
