"""Immutable image description tree.

An :class:`Image` is a value describing *what* to draw, never a canvas. The
tree has four kinds of node:

* primitives: :class:`Square`, :class:`Circle`, :class:`Rectangle`;
* composites: :class:`Beside` (left to right, bottoms aligned),
  :class:`Above` (top to bottom, centered) and :class:`On` (centered
  stacking, first operand painted on top);
* :class:`Styled`: a base image plus a :class:`~recursive_images.style.Style`;
* :class:`Empty`: the zero-size identity of every combinator.

All nodes are frozen dataclasses. Combinators are plain functions
(:func:`beside`, :func:`on`, ...) mirrored as fluent methods, so both
``beside(square(10), circle(5))`` and ``square(10).beside(circle(5))`` work.
Composing with :data:`EMPTY` returns the other operand itself.

Every node caches its :class:`BoundingBox` and hash at construction time from
its children's cached values, and composite equality walks an explicit stack,
so measuring, hashing and comparing an arbitrarily deep tree never recurses.
``repr`` is the dataclass one and does recurse.
"""

from dataclasses import dataclass, field, replace
from numbers import Real
from typing import Any, ClassVar, List, Tuple

from recursive_images.color import TRANSPARENT, Color
from recursive_images.style import Style
from recursive_images.types import ShapeKind


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned extent of an image.

    Attributes:
        width: Horizontal extent (never negative).
        height: Vertical extent (never negative).
    """

    width: float = 0.0
    height: float = 0.0

    def beside(self, other: "BoundingBox") -> "BoundingBox":
        return BoundingBox(self.width + other.width, max(self.height, other.height))

    def above(self, other: "BoundingBox") -> "BoundingBox":
        return BoundingBox(max(self.width, other.width), self.height + other.height)

    def on(self, other: "BoundingBox") -> "BoundingBox":
        return BoundingBox(max(self.width, other.width), max(self.height, other.height))


EMPTY_BOX = BoundingBox()


class Image:
    """Base of every image node; provides the fluent combinator API."""

    bounding_box: BoundingBox

    def beside(self, other: "Image") -> "Image":
        return beside(self, other)

    def on(self, other: "Image") -> "Image":
        return on(self, other)

    def under(self, other: "Image") -> "Image":
        return under(self, other)

    def above(self, other: "Image") -> "Image":
        return above(self, other)

    def below(self, other: "Image") -> "Image":
        return below(self, other)

    def fill_color(self, color: Color) -> "Image":
        return fill_color(self, color)

    def stroke_color(self, color: Color) -> "Image":
        return stroke_color(self, color)

    def stroke_width(self, width: float) -> "Image":
        return stroke_width(self, width)

    def no_fill(self) -> "Image":
        return no_fill(self)

    def no_stroke(self) -> "Image":
        return no_stroke(self)


def _set_box(node: Image, box: BoundingBox) -> None:
    object.__setattr__(node, "bounding_box", box)


@dataclass(frozen=True)
class Empty(Image):
    """Zero-size image; identity element of every combinator."""

    bounding_box: BoundingBox = field(
        init=False, repr=False, compare=False, default=EMPTY_BOX
    )


EMPTY = Empty()


# -------- Primitives --------


@dataclass(frozen=True)
class Square(Image):
    """Square of the given side. Non-positive sides give an invisible image."""

    kind: ClassVar[ShapeKind] = ShapeKind.SQUARE

    side: float
    bounding_box: BoundingBox = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        extent = max(0.0, float(self.side))
        _set_box(self, BoundingBox(extent, extent))


@dataclass(frozen=True)
class Circle(Image):
    """Circle of the given radius; its box is the diameter on both axes."""

    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    radius: float
    bounding_box: BoundingBox = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        extent = max(0.0, 2.0 * float(self.radius))
        _set_box(self, BoundingBox(extent, extent))


@dataclass(frozen=True)
class Rectangle(Image):
    kind: ClassVar[ShapeKind] = ShapeKind.RECTANGLE

    width: float
    height: float
    bounding_box: BoundingBox = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _set_box(
            self,
            BoundingBox(max(0.0, float(self.width)), max(0.0, float(self.height))),
        )


Primitive = Square | Circle | Rectangle


# -------- Composites --------


class Composite(Image):
    """Base of nodes that hold child images.

    Equality walks both trees with an explicit stack and the hash is computed
    once at construction from the children's cached hashes, so comparing or
    hashing a deep picture never recurses.
    """

    _hash: int

    def children(self) -> Tuple[Image, ...]:
        raise NotImplementedError

    def payload(self) -> Tuple[Any, ...]:
        """Non-image fields that take part in equality."""
        return ()

    def _finish(self, box: BoundingBox) -> None:
        _set_box(self, box)
        child_hashes = tuple(hash(child) for child in self.children())
        object.__setattr__(
            self, "_hash", hash((type(self).__name__, self.payload(), child_hashes))
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return structurally_equal(self, other)

    def __hash__(self) -> int:
        return self._hash


def structurally_equal(first: Image, second: Image) -> bool:
    """Return True if both trees have the same shape, sizes and styles."""
    stack: List[Tuple[Image, Image]] = [(first, second)]
    while stack:
        a, b = stack.pop()
        if a is b:
            continue
        if type(a) is not type(b):
            return False
        if isinstance(a, Composite) and isinstance(b, Composite):
            if a._hash != b._hash or a.payload() != b.payload():
                return False
            stack.extend(zip(a.children(), b.children()))
        elif a != b:
            return False
    return True


@dataclass(frozen=True, eq=False)
class Beside(Composite):
    """``right`` placed immediately to the right of ``left``, bottoms aligned."""

    left: Image
    right: Image
    bounding_box: BoundingBox = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._finish(self.left.bounding_box.beside(self.right.bounding_box))

    def children(self) -> Tuple[Image, ...]:
        return self.left, self.right


@dataclass(frozen=True, eq=False)
class Above(Composite):
    """``top`` stacked over ``bottom``, horizontally centered."""

    top: Image
    bottom: Image
    bounding_box: BoundingBox = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._finish(self.top.bounding_box.above(self.bottom.bounding_box))

    def children(self) -> Tuple[Image, ...]:
        return self.top, self.bottom


@dataclass(frozen=True, eq=False)
class On(Composite):
    """``top`` layered over ``bottom``; both centered on a common origin."""

    top: Image
    bottom: Image
    bounding_box: BoundingBox = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._finish(self.top.bounding_box.on(self.bottom.bounding_box))

    def children(self) -> Tuple[Image, ...]:
        return self.top, self.bottom


@dataclass(frozen=True, eq=False)
class Styled(Composite):
    """``image`` drawn with ``style``; geometry is unchanged."""

    image: Image
    style: Style
    bounding_box: BoundingBox = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._finish(self.image.bounding_box)

    def children(self) -> Tuple[Image, ...]:
        return (self.image,)

    def payload(self) -> Tuple[Any, ...]:
        return (self.style,)


# -------- Constructors --------


def _check_size(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")


def _check_image(value: Any) -> None:
    if not isinstance(value, Image):
        raise TypeError(f"Expected an Image, got {type(value).__name__}")


def _check_color(value: Any) -> None:
    if not isinstance(value, Color):
        raise TypeError(f"Expected a Color, got {type(value).__name__}")


def square(side: float) -> Image:
    _check_size("side", side)
    return Square(side)


def circle(radius: float) -> Image:
    _check_size("radius", radius)
    return Circle(radius)


def rectangle(width: float, height: float) -> Image:
    _check_size("width", width)
    _check_size("height", height)
    return Rectangle(width, height)


# -------- Combinators --------


def beside(left: Image, right: Image) -> Image:
    """Place ``right`` to the right of ``left``."""
    _check_image(left)
    _check_image(right)
    if isinstance(left, Empty):
        return right
    if isinstance(right, Empty):
        return left
    return Beside(left, right)


def above(top: Image, bottom: Image) -> Image:
    """Stack ``top`` over ``bottom``."""
    _check_image(top)
    _check_image(bottom)
    if isinstance(top, Empty):
        return bottom
    if isinstance(bottom, Empty):
        return top
    return Above(top, bottom)


def below(bottom: Image, top: Image) -> Image:
    return above(top, bottom)


def on(top: Image, bottom: Image) -> Image:
    """Layer ``top`` over ``bottom`` (``top`` paints last)."""
    _check_image(top)
    _check_image(bottom)
    if isinstance(top, Empty):
        return bottom
    if isinstance(bottom, Empty):
        return top
    return On(top, bottom)


def under(bottom: Image, top: Image) -> Image:
    return on(top, bottom)


# -------- Styling --------


def _restyle(image: Image, **changes: Any) -> Image:
    _check_image(image)
    if isinstance(image, Empty):
        return image
    if isinstance(image, Styled):
        return Styled(image.image, replace(image.style, **changes))
    return Styled(image, Style(**changes))


def fill_color(image: Image, color: Color) -> Image:
    """Set the interior color, overriding any fill already set on ``image``."""
    _check_color(color)
    return _restyle(image, fill=color)


def stroke_color(image: Image, color: Color) -> Image:
    """Set the outline color, overriding any stroke already set on ``image``."""
    _check_color(color)
    return _restyle(image, stroke=color)


def stroke_width(image: Image, width: float) -> Image:
    """Set the outline width; negative widths become zero."""
    _check_size("width", width)
    return _restyle(image, stroke_width=float(width))


def no_fill(image: Image) -> Image:
    return _restyle(image, fill=TRANSPARENT)


def no_stroke(image: Image) -> Image:
    return _restyle(image, stroke_width=0.0)
