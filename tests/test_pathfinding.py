"""Tests for the A* engine, node relaxation and path reconstruction."""

import pytest

from tilemaze.environment import (
    NO_NEIGHBOR,
    Tile,
    generate_tiles,
    link_neighbors,
    reachable_ids,
    shortest_path_length,
)
from tilemaze.environment.helpers import path_is_connected
from tilemaze.errors import NodeIndexError, PathCycleError
from tilemaze.pathfinding import (
    Pathfinder,
    RelaxationRule,
    manhattan_heuristic,
    reconstruct_path,
)
from tilemaze.random_source import StdlibRandomSource


OPEN_4X4 = ["....", "....", "....", "...."]


def random_linked_grid(seed: int, columns: int = 15, rows: int = 10):
    tiles = generate_tiles(columns, rows, 1, rng=StdlibRandomSource(seed=seed))
    link_neighbors(tiles, columns, rows)
    return tiles


def test_open_4x4_corner_to_corner(layout_tiles):
    tiles = layout_tiles(OPEN_4X4)

    result = Pathfinder(tiles).search(0, 15)

    assert result.found is True
    assert result.path[0] == 0 and result.path[-1] == 15
    assert result.edge_count == 6
    assert path_is_connected(tiles, result.path)
    assert tiles[15].cost_from_start == 60

    scores = [tiles[node_id].total_score for node_id in result.closed_order]
    assert scores == sorted(scores)


def test_tie_break_cadence_produces_zig_zag_path(layout_tiles):
    tiles = layout_tiles(["...", "...", "..."])

    result = Pathfinder(tiles).search(0, 8)

    # forward neighbor order only on iterations 0, 4, 8
    assert result.closed_order == [0, 3, 1, 4, 6, 2, 5, 7, 8]
    assert result.iterations == 9
    assert result.path == [0, 3, 4, 5, 8]


def test_walled_in_goal_exhausts_open_list(layout_tiles):
    tiles = layout_tiles([
        ".#.",
        "#.#",
        ".#.",
    ])
    assert tiles[4].neighbor_ids() == []

    pathfinder = Pathfinder(tiles)
    result = pathfinder.search(0, 4)

    assert result.found is False
    assert result.path == []
    assert result.edge_count is None
    assert result.open_remaining == []
    assert 4 not in pathfinder.closed
    assert result.closed_order == [0]


def test_wall_start_expands_through_outgoing_links(layout_tiles):
    tiles = layout_tiles(["#.."])

    result = Pathfinder(tiles).search(0, 2)

    assert result.found is True
    assert result.path == [0, 1, 2]


def test_wall_goal_is_never_reached(layout_tiles):
    tiles = layout_tiles(["..#"])

    result = Pathfinder(tiles).search(0, 2)

    assert result.found is False
    assert result.closed_order == [0, 1]


def test_start_equals_goal(layout_tiles):
    tiles = layout_tiles(OPEN_4X4)

    result = Pathfinder(tiles).search(5, 5)

    assert result.found is True
    assert result.path == [5]
    assert result.iterations == 1


def test_search_resets_state_for_every_tile(layout_tiles):
    tiles = layout_tiles(OPEN_4X4)
    pathfinder = Pathfinder(tiles)
    pathfinder.search(0, 15)

    pathfinder.search(15, 0)

    goal = tiles[0]
    for tile in tiles:
        assert tile.heuristic_to_goal == manhattan_heuristic(tile, goal)
        assert tile.total_score == tile.cost_from_start + tile.heuristic_to_goal
    assert tiles[15].parent_id == NO_NEIGHBOR


def test_repeated_search_is_deterministic():
    tiles = random_linked_grid(seed=21, columns=20, rows=14)
    pathfinder = Pathfinder(tiles)

    first = pathfinder.search(0, len(tiles) - 1)
    first_parents = [tile.parent_id for tile in tiles]
    second = pathfinder.search(0, len(tiles) - 1)

    assert second.closed_order == first.closed_order
    assert [tile.parent_id for tile in tiles] == first_parents
    assert second.found == first.found


@pytest.mark.parametrize("seed", range(12))
def test_search_outcome_matches_reachability(seed):
    tiles = random_linked_grid(seed)
    start_id, end_id = 0, len(tiles) - 1
    pathfinder = Pathfinder(tiles)

    result = pathfinder.search(start_id, end_id)

    if result.found:
        # parent chain reaches the start through closed tiles only
        assert result.path[0] == start_id
        assert set(result.path) <= pathfinder.closed
        assert path_is_connected(tiles, result.path)
        assert result.edge_count == shortest_path_length(tiles, start_id, end_id)
    else:
        assert result.open_remaining == []
        assert end_id not in reachable_ids(tiles, start_id)
        assert shortest_path_length(tiles, start_id, end_id) is None


@pytest.mark.parametrize("seed", range(6))
def test_scores_stay_consistent_after_search(seed):
    tiles = random_linked_grid(seed)
    Pathfinder(tiles).search(3, len(tiles) - 4)

    for tile in tiles:
        assert tile.total_score == tile.cost_from_start + tile.heuristic_to_goal


def late_shortcut_graph():
    """Hand-linked graph where a cheaper route to N is found after N is open.

    S -> X -> A -> N -> G is discovered first; S -> B -> N is cheaper but B
    is only expanded once N already sits in the open list.
    """
    coords = [(0, 0), (3, 0), (3, 1), (4, 3), (2, 2), (4, 0)]
    tiles = [Tile(node_id=i, x_id=x, y_id=y) for i, (x, y) in enumerate(coords)]
    s, x, a, n, b, g = tiles
    s.neighbor_bottom = b.node_id
    s.neighbor_right = x.node_id
    x.neighbor_right = a.node_id
    a.neighbor_bottom = n.node_id
    b.neighbor_right = n.node_id
    n.neighbor_top = g.node_id
    return tiles


def test_standard_relaxation_reparents_open_tile():
    tiles = late_shortcut_graph()

    result = Pathfinder(tiles, relaxation=RelaxationRule.STANDARD).search(0, 5)

    assert result.path == [0, 4, 3, 5]
    assert tiles[5].cost_from_start == 30


def test_frozen_relaxation_keeps_first_parent():
    tiles = late_shortcut_graph()

    result = Pathfinder(tiles, relaxation="frozen").search(0, 5)

    assert result.path == [0, 1, 2, 3, 5]
    assert tiles[3].parent_id == 2
    assert tiles[5].cost_from_start == 40


@pytest.mark.parametrize("seed", [35, 66, 83])
def test_relaxation_rules_pick_different_equal_length_paths(seed):
    standard_tiles = random_linked_grid(seed, columns=20, rows=14)
    frozen_tiles = random_linked_grid(seed, columns=20, rows=14)
    end_id = len(standard_tiles) - 1

    standard = Pathfinder(standard_tiles, relaxation=RelaxationRule.STANDARD).search(0, end_id)
    frozen = Pathfinder(frozen_tiles, relaxation=RelaxationRule.FROZEN).search(0, end_id)

    assert standard.found and frozen.found
    assert standard.path != frozen.path
    assert standard.edge_count == frozen.edge_count
    assert standard.edge_count == shortest_path_length(standard_tiles, 0, end_id)


def test_equal_cost_route_does_not_reparent(layout_tiles):
    tiles = layout_tiles(["..", ".."])
    pathfinder = Pathfinder(tiles)
    pathfinder.reset(3)
    pathfinder.open = [0]
    pathfinder.closed = {0}

    pathfinder.check_node(0, 1)
    pathfinder.check_node(0, 2)
    pathfinder.closed.update({1, 2})
    pathfinder.check_node(1, 3)
    pathfinder.check_node(2, 3)

    assert tiles[3].parent_id == 1
    assert tiles[3].cost_from_start == 20


def test_check_node_adds_unseen_neighbor(layout_tiles):
    tiles = layout_tiles(["..."])
    pathfinder = Pathfinder(tiles, step_cost=7)
    pathfinder.reset(2)

    pathfinder.check_node(0, 1)

    assert pathfinder.open == [1]
    assert tiles[1].parent_id == 0
    assert tiles[1].cost_from_start == 7
    assert tiles[1].total_score == 7 + 7


def test_invalid_ids_fail_fast(layout_tiles):
    tiles = layout_tiles(OPEN_4X4)

    with pytest.raises(NodeIndexError):
        Pathfinder(tiles).search(0, 16)
    with pytest.raises(NodeIndexError):
        Pathfinder(tiles).search(-1, 3)


def test_reconstruct_path_walks_parents(layout_tiles):
    tiles = layout_tiles(OPEN_4X4)
    Pathfinder(tiles).search(0, 15)

    path = reconstruct_path(tiles, 15)

    assert path[0] == 0 and path[-1] == 15
    assert reconstruct_path(tiles, 0) == [0]


def test_reconstruct_path_detects_cycles(layout_tiles):
    tiles = layout_tiles(["..", ".."])
    tiles[0].parent_id = 1
    tiles[1].parent_id = 0

    with pytest.raises(PathCycleError):
        reconstruct_path(tiles, 1)
