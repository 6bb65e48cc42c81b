"""Structural recursion over a natural-number count.

Every picture in the chapter has the same shape::

    def picture(count, aux):
        if count == 0:
            return EMPTY
        return combine(layer(count, aux), picture(count - 1, step(aux)))

:func:`recurse` captures that skeleton once. ``layer`` receives both the
remaining count and the auxiliary value, so the same helper serves the
*auxiliary parameter* style (size, color, ... carried and transformed by
``step``) and the *closed-form* style (each layer computed from the count,
e.g. ``square(count * 10)``).

The recursion is evaluated iteratively: layers are emitted in order, then
folded from the right. The resulting tree is exactly the one the recursive
definition builds, without consuming a stack frame per layer.
"""

import logging
from typing import Any, List

from pyrsistent import pvector
from pyrsistent.typing import PVector

from recursive_images.image import EMPTY, Image
from recursive_images.types import Combinator, LayerFn, StepFn


logger = logging.getLogger(__name__)


def identity(aux: Any) -> Any:
    """Step function that carries the auxiliary value through unchanged."""
    return aux


def flip(combine: Combinator) -> Combinator:
    """Return ``combine`` with its operands swapped.

    Useful when the recursive result should sit on the left / underneath,
    e.g. ``flip(beside)`` grows a row towards the right from the base case.
    """

    def flipped(first: Image, rest: Image) -> Image:
        return combine(rest, first)

    return flipped


def _check_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"count must be an int, got {type(count).__name__}")
    if count < 0:
        raise ValueError(f"count must be a natural number, got {count}")


def layers(
    count: int, aux: Any, layer: LayerFn[Any], step: StepFn[Any] = identity
) -> PVector[Image]:
    """Return the layers a recursion of ``count`` emits, outermost first.

    Raises:
        ValueError: If ``count`` is negative.
    """
    _check_count(count)
    emitted: List[Image] = []
    for n in range(count, 0, -1):
        emitted.append(layer(n, aux))
        aux = step(aux)
    return pvector(emitted)


def recurse(
    count: int,
    aux: Any,
    layer: LayerFn[Any],
    combine: Combinator,
    step: StepFn[Any] = identity,
    base: Image = EMPTY,
) -> Image:
    """Build ``combine(layer(count, aux), recurse(count - 1, step(aux)))``.

    Arguments:
        count: Number of layers; ``0`` yields ``base``.
        aux: Starting auxiliary value (size, color, tuple of both, ...).
        layer: Draws one layer from the remaining count and current ``aux``.
        combine: Joins a layer (first operand) with the rest of the picture.
        step: Transforms ``aux`` between consecutive layers.
        base: Terminal image of the recursion.

    Raises:
        ValueError: If ``count`` is negative.
    """
    emitted = layers(count, aux, layer, step)
    logger.debug("Folding %d layers", len(emitted))
    result = base
    for image in reversed(emitted):
        result = combine(image, result)
    return result
