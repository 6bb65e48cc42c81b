"""Composable immutable images and colors for structural recursion.

This package re-exports the value types and combinators most picture code
needs: :class:`Color` and its transformations, the :class:`Image` tree with
its constructors / combinators / styling functions, :func:`layout` for
measurement, and :func:`recurse` for count-driven pictures. The chapter's
example pictures live in :mod:`recursive_images.examples.chapter`.
"""

from .color import Color, NAMED_COLORS
from .image import (
    EMPTY,
    BoundingBox,
    Image,
    above,
    below,
    beside,
    circle,
    fill_color,
    no_fill,
    no_stroke,
    on,
    rectangle,
    square,
    stroke_color,
    stroke_width,
    under,
)
from .layout import PlacedShape, layout
from .recursion import flip, layers, recurse
from .style import DEFAULT_STYLE, Style

__all__ = [
    "BoundingBox",
    "Color",
    "DEFAULT_STYLE",
    "EMPTY",
    "Image",
    "NAMED_COLORS",
    "PlacedShape",
    "Style",
    "above",
    "below",
    "beside",
    "circle",
    "fill_color",
    "flip",
    "layers",
    "layout",
    "no_fill",
    "no_stroke",
    "on",
    "rectangle",
    "recurse",
    "square",
    "stroke_color",
    "stroke_width",
    "under",
]
