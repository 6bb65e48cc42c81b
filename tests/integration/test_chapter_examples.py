# tests/integration/test_chapter_examples.py

import pytest

from recursive_images.color import RED, ROYAL_BLUE
from recursive_images.examples.chapter import (
    DEFAULT_CIRCLE_STROKE_WIDTH,
    EXAMPLE_REGISTRY,
    concentric_circles,
    fade_circles,
    gradient_boxes,
    gradient_circles,
    growing_boxes,
    growing_boxes_closed_form,
)
from recursive_images.image import EMPTY, BoundingBox, Image, circle, square
from recursive_images.layout import layout
from recursive_images.types import ShapeKind
from tests.test_utils import fills, geometry, hue_distance, radii, strokes


def test_growing_boxes_matches_hand_built_row() -> None:
    expected = square(10).beside(square(20).beside(square(30).beside(EMPTY)))
    assert growing_boxes(3, 10) == expected


def test_growing_boxes_layout() -> None:
    img = growing_boxes(3, 10)
    assert img.bounding_box == BoundingBox(60, 30)
    assert geometry(img) == [
        (ShapeKind.SQUARE, 0.0, 20.0, 10.0, 10.0),
        (ShapeKind.SQUARE, 10.0, 10.0, 20.0, 20.0),
        (ShapeKind.SQUARE, 30.0, 0.0, 30.0, 30.0),
    ]


def test_closed_form_boxes_match_auxiliary_variant_geometry() -> None:
    aux = growing_boxes(4, 10)
    closed = growing_boxes_closed_form(4)
    assert closed != aux
    assert closed.bounding_box == aux.bounding_box
    assert layout(closed) == layout(aux)


def test_gradient_boxes_spin_fill_per_box() -> None:
    img = gradient_boxes(2, ROYAL_BLUE)
    assert fills(img) == [ROYAL_BLUE, ROYAL_BLUE.spin(15)]
    assert strokes(img) == [ROYAL_BLUE, ROYAL_BLUE.spin(15)]
    assert img.bounding_box == BoundingBox(100, 50)


def test_gradient_boxes_hue_steps() -> None:
    hues = [c.hue for c in fills(gradient_boxes(4, ROYAL_BLUE)) if c is not None]
    assert [hue_distance(h, ROYAL_BLUE.hue) for h in hues] == pytest.approx(
        [0, 15, 30, 45]
    )


def test_concentric_circles_grow_outwards() -> None:
    img = concentric_circles(2, 50)
    assert img == circle(50).on(circle(55))
    # Outer circle paints first; the first (innermost) circle is on top.
    assert radii(img) == [55, 50]
    assert [p.center for p in layout(img)] == [(55.0, 55.0), (55.0, 55.0)]


def test_fade_circles_sizes_and_alphas() -> None:
    img = fade_circles(2, 50, RED)
    # Paint order is the reverse of emission order for ``on``.
    assert list(reversed(radii(img))) == [50, 57]
    alphas = [c.alpha for c in reversed(strokes(img)) if c is not None]
    assert alphas == pytest.approx([1.0, 0.95])
    assert [p.style.stroke_width for p in layout(img)] == [
        DEFAULT_CIRCLE_STROKE_WIDTH
    ] * 2


def test_gradient_circles_spin_stroke() -> None:
    img = gradient_circles(3, 50, RED)
    emitted = [c for c in reversed(strokes(img)) if c is not None]
    assert [c.hue for c in emitted] == pytest.approx([0.0, 15.0, 30.0])
    assert [c.alpha for c in emitted] == [1.0, 1.0, 1.0]
    assert list(reversed(radii(img))) == [50, 57, 64]


@pytest.mark.parametrize(
    "image",
    [
        growing_boxes(0, 10),
        growing_boxes_closed_form(0),
        gradient_boxes(0, RED),
        concentric_circles(0, 50),
        fade_circles(0, 50, RED),
        gradient_circles(0, 50, RED),
    ],
)
def test_zero_count_examples_are_empty(image: Image) -> None:
    assert image is EMPTY


def test_negative_count_is_rejected() -> None:
    with pytest.raises(ValueError):
        growing_boxes(-1, 10)
    with pytest.raises(ValueError):
        fade_circles(-3, 50, RED)


@pytest.mark.parametrize("name", sorted(EXAMPLE_REGISTRY))
def test_registry_builders_produce_pictures(name: str) -> None:
    img = EXAMPLE_REGISTRY[name]()
    assert img.bounding_box.width > 0
    assert len(layout(img)) > 0
