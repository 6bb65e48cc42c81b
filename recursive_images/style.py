"""Fill / stroke styling attached to images.

A :class:`Style` holds *optional* attributes. ``None`` means "inherit from the
enclosing image"; :meth:`Style.merged_over` resolves a child style against its
parent, and layout starts the chain from :data:`DEFAULT_STYLE`. Styles set on
an inner node therefore win over styles set on an enclosing composite.
"""

from dataclasses import dataclass
from typing import Optional

from recursive_images.color import BLACK, Color


@dataclass(frozen=True)
class Style:
    """Styling layer of an image.

    Attributes:
        fill: Interior color, or ``None`` to inherit (no fill at the root).
        stroke: Outline color, or ``None`` to inherit.
        stroke_width: Outline width, or ``None`` to inherit. Negative widths
            are normalized to zero.
    """

    fill: Optional[Color] = None
    stroke: Optional[Color] = None
    stroke_width: Optional[float] = None

    def __post_init__(self) -> None:
        if self.stroke_width is not None and self.stroke_width < 0:
            object.__setattr__(self, "stroke_width", 0.0)

    def merged_over(self, parent: "Style") -> "Style":
        """Return this style with unset attributes taken from ``parent``."""
        return Style(
            fill=self.fill if self.fill is not None else parent.fill,
            stroke=self.stroke if self.stroke is not None else parent.stroke,
            stroke_width=(
                self.stroke_width
                if self.stroke_width is not None
                else parent.stroke_width
            ),
        )


DEFAULT_STYLE = Style(fill=None, stroke=BLACK, stroke_width=1.0)
"""Root style: no fill, one unit black outline."""
