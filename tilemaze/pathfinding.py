"""
A* search over the linked tile graph.

The engine works by index into a single owned tile list: the current tile and
the neighbor being relaxed are both looked up by node id, and all search-state
is written back onto the tiles themselves.

Search loop:
1. Reset every tile's g/h/f/parent for the new goal
2. Pop the open id with the lowest total score (first one wins ties)
3. Gather its links (top, bottom, right, left) and pick the traversal order
   from the iteration counter: forward on iterations 0, 4, 8, ... and
   reversed otherwise, which makes paths zig-zag instead of forming an L
4. Relax every neighbor that is not closed yet
5. Stop once the goal is closed or the open list runs dry
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Set

from .environment.grid import check_node_id
from .environment.tile import NO_NEIGHBOR, Tile
from .errors import PathCycleError
from .logging_utils import log_error, log_search, log_success


DEFAULT_STEP_COST = 10
"""Uniform cost of one edge; the Manhattan heuristic uses the same scale."""

FORWARD_ORDER_EVERY = 4


class RelaxationRule(str, Enum):
    """How ``check_node`` treats a neighbor that is already open."""

    STANDARD = "standard"
    """Re-parent the neighbor when the route via the current tile is strictly cheaper."""

    FROZEN = "frozen"
    """Never re-parent an open neighbor; its first parent and cost stick."""


@dataclass
class SearchResult:
    """Outcome of one ``Pathfinder.search`` call.

    ``found`` is False when the open list emptied before the goal closed.
    That is a normal terminal state, not an error.
    """

    start_id: int
    end_id: int
    found: bool
    closed_order: List[int] = field(default_factory=list)
    open_remaining: List[int] = field(default_factory=list)
    iterations: int = 0
    path: List[int] = field(default_factory=list)

    @property
    def edge_count(self) -> Optional[int]:
        """Number of edges on the path, or None when no path was found."""
        if not self.found:
            return None
        return len(self.path) - 1


def manhattan_heuristic(tile: Tile, goal: Tile, step_cost: int = DEFAULT_STEP_COST) -> int:
    return step_cost * (abs(tile.x_id - goal.x_id) + abs(tile.y_id - goal.y_id))


def reconstruct_path(tiles: Sequence[Tile], end_id: int) -> List[int]:
    """Walk ``parent_id`` back from ``end_id`` and return ids ordered start -> end.

    The walk stops at the first tile without a parent (the search origin). A
    chain longer than the tile count means the search-state is corrupted.
    """
    check_node_id(tiles, end_id)
    path = [end_id]
    current = tiles[end_id]
    while current.parent_id != NO_NEIGHBOR:
        if len(path) > len(tiles):
            raise PathCycleError(end_id=end_id, steps=len(path))
        current = tiles[check_node_id(tiles, current.parent_id)]
        path.append(current.node_id)
    path.reverse()
    return path


class Pathfinder:
    """A* engine bound to one tile array."""

    def __init__(
        self,
        tiles: Sequence[Tile],
        *,
        step_cost: int = DEFAULT_STEP_COST,
        relaxation: RelaxationRule | str = RelaxationRule.STANDARD,
        verbose: bool = False,
    ):
        self.tiles = tiles
        self.step_cost = step_cost
        self.relaxation = RelaxationRule(relaxation)
        self.verbose = verbose
        self.open: List[int] = []
        self.closed: Set[int] = set()
        self.closed_order: List[int] = []

    def reset(self, end_id: int) -> None:
        """Clear open/closed sets and reinitialize every tile for a new goal."""
        goal = self.tiles[end_id]
        for tile in self.tiles:
            tile.reset_search_state(manhattan_heuristic(tile, goal, self.step_cost))
        self.open = []
        self.closed = set()
        self.closed_order = []

    def search(self, start_id: int, end_id: int) -> SearchResult:
        """Search from ``start_id`` to ``end_id``, annotating tiles in place.

        Raises:
            NodeIndexError: If either id does not index the tile array
        """
        check_node_id(self.tiles, start_id)
        check_node_id(self.tiles, end_id)
        self.reset(end_id)
        self.open.append(start_id)

        iterations = 0
        while end_id not in self.closed and self.open:
            current_id = self._pop_lowest_score()
            self.closed.add(current_id)
            self.closed_order.append(current_id)

            neighbors = self.tiles[current_id].neighbor_ids()
            if iterations % FORWARD_ORDER_EVERY != 0:
                neighbors.reverse()

            for neighbor_id in neighbors:
                if neighbor_id >= 0 and neighbor_id not in self.closed:
                    self.check_node(current_id, neighbor_id)

            iterations += 1

        found = end_id in self.closed
        result = SearchResult(
            start_id=start_id,
            end_id=end_id,
            found=found,
            closed_order=list(self.closed_order),
            open_remaining=list(self.open),
            iterations=iterations,
            path=reconstruct_path(self.tiles, end_id) if found else [],
        )

        if self.verbose:
            if found:
                log_success(
                    f"[Search] {start_id} -> {end_id}: {result.edge_count} steps, "
                    f"{iterations} iterations, {len(self.closed)} closed"
                )
            else:
                log_error(
                    f"[Search] {start_id} -> {end_id}: no path "
                    f"({iterations} iterations, {len(self.closed)} closed)"
                )
        return result

    def check_node(self, current_id: int, neighbor_id: int) -> None:
        """Relax ``neighbor_id`` against the freshly closed ``current_id``."""
        current = self.tiles[current_id]
        neighbor = self.tiles[neighbor_id]

        if neighbor_id not in self.open:
            self.open.append(neighbor_id)
            neighbor.assign_parent(current, self.step_cost)
            return

        if self.relaxation is RelaxationRule.FROZEN:
            return

        if current.cost_from_start + self.step_cost < neighbor.cost_from_start:
            if self.verbose:
                log_search(
                    f"[Relax] {neighbor_id}: parent {neighbor.parent_id} -> {current_id} "
                    f"(g {neighbor.cost_from_start} -> {current.cost_from_start + self.step_cost})"
                )
            neighbor.assign_parent(current, self.step_cost)

    def _pop_lowest_score(self) -> int:
        best_index = 0
        best_score = self.tiles[self.open[0]].total_score
        for index in range(1, len(self.open)):
            score = self.tiles[self.open[index]].total_score
            if score < best_score:
                best_index = index
                best_score = score
        return self.open.pop(best_index)
