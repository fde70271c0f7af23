"""
Pydantic schemas for world snapshots.

A snapshot is what a renderer receives after each ``World.step()``: the grid,
the start/end selection, the player spawn and the latest search outcome. The
runtime keeps mutable dataclasses; these models are the serializable copy.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from tilemaze.environment import GridState


class SearchSummary(BaseModel):
    """Serializable outcome of the most recent search."""

    start_id: int
    end_id: int
    found: bool = Field(..., description="True when the goal entered the closed set")
    path: List[int] = Field(default_factory=list, description="Node ids from start to end")
    closed_order: List[int] = Field(default_factory=list, description="Order tiles were closed")
    iterations: int = 0
    relaxation: str = "standard"

    @property
    def edge_count(self) -> Optional[int]:
        if not self.found:
            return None
        return len(self.path) - 1


class WorldSnapshot(BaseModel):
    """State of the world after one host step."""

    tick: int = Field(..., description="Number of completed steps since the last reset")
    generation: int = Field(0, description="How many times the grid has been reset")
    start_id: int
    end_id: int
    spawn_position: Tuple[float, float] = Field(
        ..., description="Pixel position of the start cell's top-left corner",
    )
    grid: GridState
    search: Optional[SearchSummary] = None

    def path_positions(self) -> List[Tuple[int, int]]:
        """(x, y) cell coordinates along the found path, empty when none."""
        if self.search is None or not self.search.found:
            return []
        return [(self.grid.tiles[i].x_id, self.grid.tiles[i].y_id) for i in self.search.path]
