"""Tile grid, neighbor linking and graph helpers for tilemaze."""

from .tile import NO_NEIGHBOR, Tile
from .grid import (
    DEFAULT_WALL_PROBABILITY,
    TileGrid,
    check_node_id,
    generate_tiles,
    grid_shape,
    infer_shape,
    pixel_position,
    tile_id_at,
)
from .graph import adjacency, link_neighbors
from .schemas import GridState, TileState
from .helpers import reachable_ids, shortest_path_length

__all__ = [
    "NO_NEIGHBOR",
    "Tile",
    "DEFAULT_WALL_PROBABILITY",
    "TileGrid",
    "check_node_id",
    "generate_tiles",
    "grid_shape",
    "infer_shape",
    "pixel_position",
    "tile_id_at",
    "adjacency",
    "link_neighbors",
    "GridState",
    "TileState",
    "reachable_ids",
    "shortest_path_length",
]
