"""Unit helpers for angles and 0-1 ratios.

``degrees`` and ``normalized`` mark literal values in picture code the way a
reader would say "15 degrees" or "0.05 of opacity". They return plain floats;
the wrapping and clamping rules are the ones :class:`Color` applies to its
channels.
"""

from recursive_images.types import Degrees, Normalized


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Return ``value`` limited to the closed range ``[low, high]``."""
    if low > high:
        raise ValueError(f"Empty clamp range: [{low}, {high}]")
    return max(low, min(high, float(value)))


def degrees(value: float) -> Degrees:
    """Return ``value`` as an angle wrapped into ``[0, 360)``."""
    angle = float(value) % 360.0
    # Tiny negative inputs round up to exactly 360.0.
    return 0.0 if angle >= 360.0 else angle


def normalized(value: float) -> Normalized:
    """Return ``value`` clamped into ``[0, 1]``."""
    return clamp(value, 0.0, 1.0)
