"""
Exceptions raised by the tilemaze core.

Every failure here is a caller contract violation or a fatal collaborator
failure. A search that finds no path is NOT an error: it is reported through
``SearchResult.found`` instead.
"""

from typing import Optional


class TileMazeError(Exception):
    """Base class for all tilemaze errors."""


class GridDimensionError(TileMazeError, ValueError):
    """Raised when grid dimensions cannot produce a rectangular tile array."""

    def __init__(self, *, width: int, height: int, cell_size: int, reason: str) -> None:
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.reason = reason
        message = (
            f"Invalid grid {width}x{height} with cell size {cell_size}: {reason}\n\n"
            "Remediation tips:\n"
            "  - Width, height and cell size must all be positive\n"
            "  - Width and height must be exact multiples of the cell size\n"
            "  - Check TILEMAZE_WIDTH / TILEMAZE_HEIGHT / TILEMAZE_CELL_SIZE"
        )
        super().__init__(message)


class NodeIndexError(TileMazeError, IndexError):
    """Raised when a node id falls outside ``[0, tile_count)``."""

    def __init__(self, *, node_id: int, tile_count: int) -> None:
        self.node_id = node_id
        self.tile_count = tile_count
        super().__init__(
            f"Node id {node_id} is out of range for a grid of {tile_count} tiles "
            f"(valid ids are 0..{tile_count - 1})"
        )


class RandomSourceError(TileMazeError, RuntimeError):
    """Raised when the injected random source fails or returns a bad value."""

    def __init__(self, *, operation: str, underlying: Optional[Exception] = None, value: object = None) -> None:
        self.operation = operation
        self.underlying = underlying
        self.value = value
        if underlying is not None:
            detail = f"{type(underlying).__name__}: {underlying}"
        else:
            detail = f"returned out-of-range value {value!r}"
        message = (
            f"Random source failed during {operation}: {detail}\n\n"
            "A grid cannot be generated without randomness.\n"
            "Remediation tips:\n"
            "  - random() must return a float in [0, 1)\n"
            "  - random_range(lo, hi) must return an int in [lo, hi]"
        )
        super().__init__(message)


class PathCycleError(TileMazeError, RuntimeError):
    """Raised when a parent chain does not terminate within the tile count."""

    def __init__(self, *, end_id: int, steps: int) -> None:
        self.end_id = end_id
        self.steps = steps
        super().__init__(
            f"Parent chain from node {end_id} did not terminate after {steps} steps; "
            "tile search-state is corrupted (was the grid reset mid-search?)"
        )
