"""Shared fixtures: scripted randomness and layout-built grids."""

from __future__ import annotations

from typing import Iterable, List, Optional

import pytest

from tilemaze.environment import Tile, generate_tiles, link_neighbors


class SequenceRandomSource:
    """Replays fixed values; raises IndexError once a queue runs dry."""

    def __init__(self, floats: Iterable[float] = (), ints: Iterable[int] = ()):
        self.floats: List[float] = list(floats)
        self.ints: List[int] = list(ints)

    def random(self) -> float:
        return self.floats.pop(0)

    def random_range(self, lo: int, hi: int) -> int:
        return self.ints.pop(0)


def layout_draws(layout: List[str]) -> List[float]:
    """Row-major draws that turn '#' cells into walls and '.' cells into floor."""
    return [0.99 if cell == "#" else 0.0 for row in layout for cell in row]


def tiles_from_layout(layout: List[str]) -> List[Tile]:
    """Generate and link a grid with cell size 1 from an ASCII layout."""
    rows = len(layout)
    columns = len(layout[0])
    rng = SequenceRandomSource(floats=layout_draws(layout))
    tiles = generate_tiles(columns, rows, 1, rng=rng)
    link_neighbors(tiles, columns, rows)
    return tiles


@pytest.fixture
def scripted_rng():
    def factory(floats: Iterable[float] = (), ints: Optional[Iterable[int]] = None) -> SequenceRandomSource:
        return SequenceRandomSource(floats=floats, ints=ints or ())

    return factory


@pytest.fixture
def layout_tiles():
    return tiles_from_layout


@pytest.fixture
def draws_for_layout():
    return layout_draws
