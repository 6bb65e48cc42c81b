"""Measurement and placement of image trees.

:func:`layout` is the contract a rendering backend consumes: it flattens an
:class:`~recursive_images.image.Image` into the primitives it contains, each
with an absolute position and a fully resolved style, in paint order.

Coordinates are y-down with the origin at the top-left corner of the whole
image's bounding box; ``(x, y)`` of a :class:`PlacedShape` is the top-left
corner of that primitive's own box. Placement rules:

* ``Beside``: children share a bottom baseline; right follows left.
* ``Above``: children are centered horizontally; bottom follows top.
* ``On``: children are centered on both axes; the bottom child paints first.

The traversal uses an explicit stack so very deep trees (e.g. produced by a
large recursion count) do not hit the interpreter recursion limit.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from recursive_images.image import (
    Above,
    Beside,
    BoundingBox,
    Circle,
    Empty,
    Image,
    On,
    Primitive,
    Rectangle,
    Square,
    Styled,
)
from recursive_images.style import DEFAULT_STYLE, Style
from recursive_images.types import ShapeKind


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlacedShape:
    """A primitive positioned and styled for painting.

    Attributes:
        shape: The primitive node (``Square``, ``Circle`` or ``Rectangle``).
        x: Left edge of the primitive's box.
        y: Top edge of the primitive's box.
        style: Resolved style (every attribute inherited or defaulted).
    """

    shape: Primitive
    x: float
    y: float
    style: Style

    @property
    def kind(self) -> ShapeKind:
        return self.shape.kind

    @property
    def bounding_box(self) -> BoundingBox:
        return self.shape.bounding_box

    @property
    def center(self) -> Tuple[float, float]:
        box = self.shape.bounding_box
        return self.x + box.width / 2.0, self.y + box.height / 2.0


def bounding_box(image: Image) -> BoundingBox:
    """Return the extent of ``image``."""
    return image.bounding_box


def _centered(outer: BoundingBox, inner: BoundingBox) -> Tuple[float, float]:
    return (outer.width - inner.width) / 2.0, (outer.height - inner.height) / 2.0


def layout(image: Image, root_style: Style = DEFAULT_STYLE) -> PVector[PlacedShape]:
    """Return the primitives of ``image`` in paint order.

    Arguments:
        image: Tree to flatten.
        root_style: Style the outermost node inherits from.
    """
    placed: List[PlacedShape] = []
    # LIFO: push the child that paints *last* first.
    stack: List[Tuple[Image, float, float, Style]] = [(image, 0.0, 0.0, root_style)]
    while stack:
        node, x, y, style = stack.pop()
        box = node.bounding_box
        if isinstance(node, Empty):
            continue
        if isinstance(node, Styled):
            stack.append((node.image, x, y, node.style.merged_over(style)))
        elif isinstance(node, Beside):
            left_box = node.left.bounding_box
            right_box = node.right.bounding_box
            stack.append(
                (node.right, x + left_box.width, y + box.height - right_box.height, style)
            )
            stack.append((node.left, x, y + box.height - left_box.height, style))
        elif isinstance(node, Above):
            top_dx, _ = _centered(box, node.top.bounding_box)
            bottom_dx, _ = _centered(box, node.bottom.bounding_box)
            stack.append(
                (node.bottom, x + bottom_dx, y + node.top.bounding_box.height, style)
            )
            stack.append((node.top, x + top_dx, y, style))
        elif isinstance(node, On):
            top_dx, top_dy = _centered(box, node.top.bounding_box)
            bottom_dx, bottom_dy = _centered(box, node.bottom.bounding_box)
            stack.append((node.top, x + top_dx, y + top_dy, style))
            stack.append((node.bottom, x + bottom_dx, y + bottom_dy, style))
        elif isinstance(node, (Square, Circle, Rectangle)):
            placed.append(PlacedShape(shape=node, x=x, y=y, style=style))
        else:
            raise TypeError(f"Unknown image node: {type(node).__name__}")

    logger.debug(
        "Laid out %d shapes in a %sx%s box",
        len(placed),
        image.bounding_box.width,
        image.bounding_box.height,
    )
    return pvector(placed)
