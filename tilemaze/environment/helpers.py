"""Utilities for walking the as-built neighbor graph."""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Sequence, Set

from .grid import check_node_id
from .tile import Tile


def reachable_ids(tiles: Sequence[Tile], start_id: int) -> Set[int]:
    """Return every node id reachable from ``start_id`` by following links.

    Uses breadth-first search over the directed links exactly as the linker
    built them, so a wall start still reaches its open neighbors.
    """
    check_node_id(tiles, start_id)
    visited = {start_id}
    queue: deque[int] = deque([start_id])

    while queue:
        node_id = queue.popleft()
        for neighbor in tiles[node_id].neighbor_ids():
            if neighbor in visited:
                continue
            visited.add(neighbor)
            queue.append(neighbor)
    return visited


def shortest_path_length(tiles: Sequence[Tile], start_id: int, goal_id: int) -> Optional[int]:
    """Number of edges on a shortest linked route, or None when unreachable.

    Plain BFS; used as a reference when checking that the A* engine returns
    optimal routes.
    """
    check_node_id(tiles, start_id)
    check_node_id(tiles, goal_id)
    if start_id == goal_id:
        return 0

    distance: Dict[int, int] = {start_id: 0}
    queue: deque[int] = deque([start_id])

    while queue:
        node_id = queue.popleft()
        for neighbor in tiles[node_id].neighbor_ids():
            if neighbor in distance:
                continue
            distance[neighbor] = distance[node_id] + 1
            # BFS reaches each node first along a shortest route
            if neighbor == goal_id:
                return distance[neighbor]
            queue.append(neighbor)
    return None


def path_is_connected(tiles: Sequence[Tile], path: List[int]) -> bool:
    """True when every consecutive pair in ``path`` is joined by a link."""
    for current, following in zip(path, path[1:]):
        if following not in tiles[current].neighbor_ids():
            return False
    return True
