# tests/utils/test_units.py

import pytest

from recursive_images.utils.units import clamp, degrees, normalized


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, 0.0),
        (15, 15.0),
        (360, 0.0),
        (375, 15.0),
        (-15, 345.0),
        (-720, 0.0),
        (-1e-17, 0.0),
    ],
)
def test_degrees_wraps(value: float, expected: float) -> None:
    assert degrees(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(0.05, 0.05), (0, 0.0), (1, 1.0), (-0.3, 0.0), (1.7, 1.0)],
)
def test_normalized_clamps(value: float, expected: float) -> None:
    assert normalized(value) == expected


def test_clamp_custom_range() -> None:
    assert clamp(5, 0, 3) == 3.0
    assert clamp(-5, -2, 3) == -2.0
    assert clamp(1.5, 0, 3) == 1.5


def test_clamp_rejects_empty_range() -> None:
    with pytest.raises(ValueError):
        clamp(1, 2, 1)
