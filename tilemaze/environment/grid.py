"""Rectangular tile grid generation and bounds-checked lookups.

Tiles live in a flat, row-major list: the tile at column ``x`` and row ``y``
sits at index ``y * columns + x`` and that index is its ``node_id``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..errors import GridDimensionError, NodeIndexError
from ..random_source import RandomSource, StdlibRandomSource, draw_unit
from .tile import Tile


DEFAULT_WALL_PROBABILITY = 0.3


def grid_shape(width: int, height: int, cell_size: int) -> Tuple[int, int]:
    """Return ``(columns, rows)`` for a pixel canvas, failing fast on bad input."""
    if cell_size <= 0 or width <= 0 or height <= 0:
        raise GridDimensionError(
            width=width, height=height, cell_size=cell_size,
            reason="dimensions must be positive",
        )
    if width % cell_size or height % cell_size:
        raise GridDimensionError(
            width=width, height=height, cell_size=cell_size,
            reason="width and height must be divisible by the cell size",
        )
    return width // cell_size, height // cell_size


def generate_tiles(
    width: int,
    height: int,
    cell_size: int,
    wall_probability: float = DEFAULT_WALL_PROBABILITY,
    rng: Optional[RandomSource] = None,
) -> List[Tile]:
    """Build the row-major tile array for a ``width`` x ``height`` canvas.

    Each tile draws once from ``rng`` (row-major order) and becomes a wall when
    the draw is ``>= 1 - wall_probability``. With the default probability this
    is the familiar "wall when draw >= 0.7" rule. Neighbor links are left unset;
    call ``link_neighbors`` afterwards.
    """
    columns, rows = grid_shape(width, height, cell_size)
    if not 0.0 <= wall_probability <= 1.0:
        raise GridDimensionError(
            width=width, height=height, cell_size=cell_size,
            reason=f"wall probability {wall_probability} is outside [0, 1]",
        )
    rng = rng or StdlibRandomSource()
    threshold = 1.0 - wall_probability

    tiles: List[Tile] = []
    for y in range(rows):
        for x in range(columns):
            is_wall = draw_unit(rng) >= threshold
            tiles.append(Tile(node_id=len(tiles), x_id=x, y_id=y, is_wall=is_wall))
    return tiles


def infer_shape(tiles: Sequence[Tile]) -> Tuple[int, int]:
    """Recover ``(columns, rows)`` from a row-major tile array."""
    if not tiles:
        return 0, 0
    last = tiles[-1]
    return last.x_id + 1, last.y_id + 1


def check_node_id(tiles: Sequence[Tile], node_id: int) -> int:
    """Return ``node_id`` unchanged if it indexes ``tiles``; raise otherwise."""
    if not 0 <= node_id < len(tiles):
        raise NodeIndexError(node_id=node_id, tile_count=len(tiles))
    return node_id


def tile_id_at(x: int, y: int, columns: int, rows: int) -> int:
    """Row-major node id for a cell coordinate."""
    if not (0 <= x < columns and 0 <= y < rows):
        raise NodeIndexError(node_id=y * columns + x, tile_count=columns * rows)
    return y * columns + x


def pixel_position(tile: Tile, cell_size: int) -> Tuple[float, float]:
    """Top-left pixel of a tile's cell; renderers and player spawn use this."""
    return float(tile.x_id * cell_size), float(tile.y_id * cell_size)


@dataclass
class TileGrid:
    """Owned tile array plus its shape."""

    columns: int
    rows: int
    cell_size: int
    tiles: List[Tile] = field(default_factory=list)

    def get_tile(self, node_id: int) -> Tile:
        return self.tiles[check_node_id(self.tiles, node_id)]

    def tile_at(self, x: int, y: int) -> Tile:
        return self.tiles[tile_id_at(x, y, self.columns, self.rows)]

    def wall_count(self) -> int:
        return sum(1 for tile in self.tiles if tile.is_wall)
