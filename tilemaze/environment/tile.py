"""Tile container for the maze grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


NO_NEIGHBOR = -1
"""Sentinel for a missing neighbor link or an unset parent."""


@dataclass
class Tile:
    """A single grid cell: identity, wall flag, links and search-state.

    ``node_id`` equals the tile's row-major index in the owning array. The
    search-state fields are overwritten by every ``Pathfinder.search`` call.
    """

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
    parent_id: int = NO_NEIGHBOR

    def neighbor_ids(self) -> List[int]:
        """Linked neighbors in search order (top, bottom, right, left), sentinels dropped."""
        ordered = (
            self.neighbor_top,
            self.neighbor_bottom,
            self.neighbor_right,
            self.neighbor_left,
        )
        return [node_id for node_id in ordered if node_id != NO_NEIGHBOR]

    def reset_search_state(self, heuristic: int) -> None:
        self.cost_from_start = 0
        self.parent_id = NO_NEIGHBOR
        self.heuristic_to_goal = heuristic
        self.total_score = heuristic

    def assign_parent(self, parent: "Tile", step_cost: int) -> None:
        """Route this tile through ``parent`` and recompute g and f."""
        self.parent_id = parent.node_id
        self.cost_from_start = parent.cost_from_start + step_cost
        self.total_score = self.cost_from_start + self.heuristic_to_goal
