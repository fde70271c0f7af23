"""Pydantic schemas for the tile grid.

These models mirror the lightweight ``Tile`` dataclass in ``tile.py`` but
keep snapshots handed to renderers serializable.
"""

from __future__ import annotations

from typing import List, Sequence

from pydantic import BaseModel, Field

from .tile import NO_NEIGHBOR, Tile


class TileState(BaseModel):
    """Serializable view of one tile, including its latest search-state."""

    node_id: int
    x_id: int
    y_id: int
    is_wall: bool = False
    neighbor_top: int = NO_NEIGHBOR
    neighbor_bottom: int = NO_NEIGHBOR
    neighbor_left: int = NO_NEIGHBOR
    neighbor_right: int = NO_NEIGHBOR
    cost_from_start: int = 0
    heuristic_to_goal: int = 0
    total_score: int = 0
    parent_id: int = Field(NO_NEIGHBOR, description="Parent node id; -1 when unset")

    @classmethod
    def from_tile(cls, tile: Tile) -> "TileState":
        return cls(
            node_id=tile.node_id,
            x_id=tile.x_id,
            y_id=tile.y_id,
            is_wall=tile.is_wall,
            neighbor_top=tile.neighbor_top,
            neighbor_bottom=tile.neighbor_bottom,
            neighbor_left=tile.neighbor_left,
            neighbor_right=tile.neighbor_right,
            cost_from_start=tile.cost_from_start,
            heuristic_to_goal=tile.heuristic_to_goal,
            total_score=tile.total_score,
            parent_id=tile.parent_id,
        )


class GridState(BaseModel):
    """Dense, row-major representation of the tile grid."""

    columns: int
    rows: int
    cell_size: int
    tiles: List[TileState] = Field(
        default_factory=list,
        description="Row-major tiles; index == node_id",
    )

    @classmethod
    def from_tiles(cls, tiles: Sequence[Tile], *, columns: int, rows: int, cell_size: int) -> "GridState":
        return cls(
            columns=columns,
            rows=rows,
            cell_size=cell_size,
            tiles=[TileState.from_tile(tile) for tile in tiles],
        )

    def wall_ids(self) -> List[int]:
        return [tile.node_id for tile in self.tiles if tile.is_wall]
