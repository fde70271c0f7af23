"""Four-directional neighbor linking over the tile array.

Links are directed. A tile links to an in-bounds neighbor only when that
neighbor is not a wall; the tile's own wall flag is never consulted, so wall
tiles keep outgoing links to open neighbors while nothing links into them.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .grid import infer_shape
from .tile import NO_NEIGHBOR, Tile


def _candidate(tiles: Sequence[Tile], x: int, y: int, columns: int, rows: int) -> int:
    if not (0 <= x < columns and 0 <= y < rows):
        return NO_NEIGHBOR
    neighbor = tiles[y * columns + x]
    if neighbor.is_wall:
        return NO_NEIGHBOR
    return neighbor.node_id


def link_neighbors(
    tiles: Sequence[Tile],
    columns: Optional[int] = None,
    rows: Optional[int] = None,
) -> None:
    """Set every tile's four neighbor references in place.

    ``columns``/``rows`` default to the shape implied by the row-major array.
    Calling this twice on the same array produces identical links.
    """
    if columns is None or rows is None:
        columns, rows = infer_shape(tiles)

    for tile in tiles:
        x, y = tile.x_id, tile.y_id
        tile.neighbor_right = _candidate(tiles, x + 1, y, columns, rows)
        tile.neighbor_left = _candidate(tiles, x - 1, y, columns, rows)
        tile.neighbor_top = _candidate(tiles, x, y - 1, columns, rows)
        tile.neighbor_bottom = _candidate(tiles, x, y + 1, columns, rows)


def adjacency(tiles: Sequence[Tile]) -> Dict[int, List[int]]:
    """Map of node_id -> linked neighbor ids, in search order."""
    return {tile.node_id: tile.neighbor_ids() for tile in tiles}
