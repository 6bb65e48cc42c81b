"""Pictures built by structural recursion with auxiliary parameters.

Each builder threads one or more auxiliary values (size, color) through
:func:`recursive_images.recursion.recurse`, transforming them at every step.
``growing_boxes_closed_form`` shows the alternative style where each layer is
computed directly from the remaining count.

Usage::

    from recursive_images.examples.chapter import EXAMPLE_REGISTRY
    picture = EXAMPLE_REGISTRY["fade_circles"]()
"""

from functools import partial
from typing import Dict, Tuple

from recursive_images.color import RED, ROYAL_BLUE, Color
from recursive_images.image import Image, beside, circle, on, square
from recursive_images.recursion import flip, recurse
from recursive_images.types import ExampleFn
from recursive_images.utils.units import degrees, normalized


DEFAULT_BOX_GROWTH = 10
DEFAULT_GRADIENT_BOX_SIDE = 50
DEFAULT_CIRCLE_GROWTH = 5
DEFAULT_FADE_CIRCLE_GROWTH = 7
DEFAULT_SPIN = degrees(15)
DEFAULT_FADE = normalized(0.05)
DEFAULT_CIRCLE_STROKE_WIDTH = 3

SizeAndColor = Tuple[float, Color]


def growing_boxes(count: int, size: float) -> Image:
    """Row of ``count`` squares, each ``DEFAULT_BOX_GROWTH`` larger than the last."""

    def layer(_: int, side: float) -> Image:
        return square(side)

    def grow(side: float) -> float:
        return side + DEFAULT_BOX_GROWTH

    return recurse(count, size, layer, beside, step=grow)


def growing_boxes_closed_form(count: int) -> Image:
    """Same row as ``growing_boxes(count, 10)``, sizing each box from the count.

    The recursive result goes on the left, so the largest (outermost) box ends
    up on the right.
    """

    def layer(n: int, _: None) -> Image:
        return square(n * DEFAULT_BOX_GROWTH)

    return recurse(count, None, layer, flip(beside))


def gradient_boxes(count: int, color: Color) -> Image:
    """Row of filled squares whose hue spins ``DEFAULT_SPIN`` per box."""

    def layer(_: int, fill: Color) -> Image:
        return square(DEFAULT_GRADIENT_BOX_SIDE).fill_color(fill).stroke_color(fill)

    def spin(fill: Color) -> Color:
        return fill.spin(DEFAULT_SPIN)

    return recurse(count, color, layer, beside, step=spin)


def concentric_circles(count: int, size: float) -> Image:
    """Circles centered on each other; the first (smallest) paints on top."""

    def layer(_: int, radius: float) -> Image:
        return circle(radius)

    def grow(radius: float) -> float:
        return radius + DEFAULT_CIRCLE_GROWTH

    return recurse(count, size, layer, on, step=grow)


def _stroked_circle(aux: SizeAndColor) -> Image:
    radius, color = aux
    return (
        circle(radius)
        .stroke_width(DEFAULT_CIRCLE_STROKE_WIDTH)
        .stroke_color(color)
    )


def fade_circles(count: int, size: float, color: Color) -> Image:
    """Growing circles whose outline fades by ``DEFAULT_FADE`` per step."""

    def layer(_: int, aux: SizeAndColor) -> Image:
        return _stroked_circle(aux)

    def step(aux: SizeAndColor) -> SizeAndColor:
        radius, stroke = aux
        return radius + DEFAULT_FADE_CIRCLE_GROWTH, stroke.fade_out_by(DEFAULT_FADE)

    return recurse(count, (size, color), layer, on, step=step)


def gradient_circles(count: int, size: float, color: Color) -> Image:
    """Growing circles whose outline hue spins ``DEFAULT_SPIN`` per step."""

    def layer(_: int, aux: SizeAndColor) -> Image:
        return _stroked_circle(aux)

    def step(aux: SizeAndColor) -> SizeAndColor:
        radius, stroke = aux
        return radius + DEFAULT_FADE_CIRCLE_GROWTH, stroke.spin(DEFAULT_SPIN)

    return recurse(count, (size, color), layer, on, step=step)


EXAMPLE_REGISTRY: Dict[str, ExampleFn] = {
    "growing_boxes": partial(growing_boxes, 5, 20),
    "growing_boxes_closed_form": partial(growing_boxes_closed_form, 5),
    "gradient_boxes": partial(gradient_boxes, 10, ROYAL_BLUE),
    "concentric_circles": partial(concentric_circles, 20, 10),
    "fade_circles": partial(fade_circles, 20, 50, RED),
    "gradient_circles": partial(gradient_circles, 20, 50, RED),
}
"""Name → builder with the chapter's default parameters."""
