import dataclasses
import math

import pytest

from georedis import DEFAULT_PRECISION_TABLE, PrecisionTable, select_bit_depth


def test_known_radii():
    assert select_bit_depth(0) == 52
    assert select_bit_depth(0.6) == 52
    assert select_bit_depth(1.0) == 50
    assert select_bit_depth(5000) == 26
    assert select_bit_depth(1_000_000) == 10


def test_falls_back_to_coarsest_depth():
    assert select_bit_depth(10_018_863) == 2
    assert select_bit_depth(1e12) == 2


def test_monotonically_non_increasing():
    radii = [0, 0.3, 0.9, 3, 10, 50, 100, 999, 1500, 5000, 20_000, 100_000,
             500_000, 3_000_000, 7_000_000, 9_000_000, 50_000_000]
    depths = [select_bit_depth(radius) for radius in radii]
    assert depths == sorted(depths, reverse=True)


@pytest.mark.parametrize("radius", [-1, math.nan, math.inf])
def test_rejects_invalid_radius(radius):
    with pytest.raises(ValueError):
        select_bit_depth(radius)


def test_custom_table():
    table = PrecisionTable(widths=(10, 100, 1000), max_bit_depth=20)
    assert select_bit_depth(5, table) == 20
    assert select_bit_depth(60, table) == 18
    assert select_bit_depth(10_000, table) == 2


def test_table_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_PRECISION_TABLE.max_bit_depth = 40  # type: ignore[misc]
    assert isinstance(DEFAULT_PRECISION_TABLE.widths, tuple)


@pytest.mark.parametrize(
    "widths, max_bit_depth",
    [
        ((1.0,), 52),
        ((10, 5, 20), 52),
        ((1, 1, 2), 52),
        (tuple(range(1, 30)), 52),
    ],
)
def test_rejects_bad_tables(widths, max_bit_depth):
    with pytest.raises(ValueError):
        PrecisionTable(widths=widths, max_bit_depth=max_bit_depth)
