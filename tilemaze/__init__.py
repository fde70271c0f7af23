"""
tilemaze - simulation core for a grid maze visualizer.

Generates a random walled tile grid, links four-directional neighbors and
finds a path between a start and an end tile with A*.

No drawing, no scheduling, no global world.
The host owns the World value and drives it with step().
"""

__version__ = "0.1.0"

from .world import World, select_targets

from .pathfinding import (
    DEFAULT_STEP_COST,
    Pathfinder,
    RelaxationRule,
    SearchResult,
    manhattan_heuristic,
    reconstruct_path,
)
from .random_source import RandomSource, StdlibRandomSource
from .host import HostSettings, TickMode
from .errors import (
    TileMazeError,
    GridDimensionError,
    NodeIndexError,
    RandomSourceError,
    PathCycleError,
)
from .environment import (
    NO_NEIGHBOR,
    Tile,
    TileGrid,
    GridState,
    TileState,
    generate_tiles,
    link_neighbors,
    reachable_ids,
    shortest_path_length,
)
from .schemas import SearchSummary, WorldSnapshot

__all__ = [
    # Main class
    "World",
    "select_targets",
    # Search
    "DEFAULT_STEP_COST",
    "Pathfinder",
    "RelaxationRule",
    "SearchResult",
    "manhattan_heuristic",
    "reconstruct_path",
    # Collaborators
    "RandomSource",
    "StdlibRandomSource",
    "HostSettings",
    "TickMode",
    # Errors
    "TileMazeError",
    "GridDimensionError",
    "NodeIndexError",
    "RandomSourceError",
    "PathCycleError",
    # Grid
    "NO_NEIGHBOR",
    "Tile",
    "TileGrid",
    "GridState",
    "TileState",
    "generate_tiles",
    "link_neighbors",
    "reachable_ids",
    "shortest_path_length",
    # Snapshots
    "SearchSummary",
    "WorldSnapshot",
]
