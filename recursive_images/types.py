"""Common type aliases and enumerations.

``Combinator``, ``LayerFn`` and ``StepFn`` are the extension points of
:func:`recursive_images.recursion.recurse`: they describe how one layer is
drawn, how the auxiliary value evolves between layers, and how a layer is
joined to the rest of the picture.
"""

from enum import StrEnum, auto
from typing import Callable, TypeVar, TYPE_CHECKING


# Forward declaration for Image typing to avoid circular imports:
if TYPE_CHECKING:
    from recursive_images.image import Image

Degrees = float
Normalized = float

Aux = TypeVar("Aux")

Combinator = Callable[["Image", "Image"], "Image"]
LayerFn = Callable[[int, Aux], "Image"]
StepFn = Callable[[Aux], Aux]
ExampleFn = Callable[[], "Image"]


class ShapeKind(StrEnum):
    """Primitive shape categories (reflected in layout output)."""

    SQUARE = auto()
    CIRCLE = auto()
    RECTANGLE = auto()
