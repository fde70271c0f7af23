"""
World orchestration.

The World exclusively owns the tile array. It is an explicit value passed to
whatever host drives it; there is no process-wide instance.

Lifecycle:
1. reset(): generate tiles, link neighbors, pick start/end and player spawn
2. search(): run A* for the current start/end on demand
3. step(): one host tick (lazy search, snapshot, listeners)

``reset()`` must not run while a search over the previous grid is in
progress; hosts call these sequentially.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from .config import Config
from .environment import (
    DEFAULT_WALL_PROBABILITY,
    GridState,
    Tile,
    TileGrid,
    generate_tiles,
    grid_shape,
    link_neighbors,
    pixel_position,
)
from .logging_utils import log_deterministic, log_info, log_search
from .pathfinding import DEFAULT_STEP_COST, Pathfinder, RelaxationRule, SearchResult
from .random_source import RandomSource, StdlibRandomSource, draw_range
from .schemas import SearchSummary, WorldSnapshot


TickListener = Callable[[int, WorldSnapshot], None]


def select_targets(
    tiles: Sequence[Tile],
    cell_size: int,
    rng: RandomSource,
) -> Tuple[int, int, Tuple[float, float]]:
    """Pick uniformly random start/end ids and derive the player spawn.

    No constraint is applied: either id may be a wall, they may coincide, and
    the end may be unreachable. Callers find out from the search result.
    """
    last_id = len(tiles) - 1
    start_id = draw_range(rng, 0, last_id)
    end_id = draw_range(rng, 0, last_id)
    spawn = pixel_position(tiles[start_id], cell_size)
    return start_id, end_id, spawn


class World:
    """Owns the grid, the start/end selection and the latest search."""

    def __init__(
        self,
        width: int,
        height: int,
        cell_size: int,
        *,
        wall_probability: float = DEFAULT_WALL_PROBABILITY,
        rng: Optional[RandomSource] = None,
        step_cost: int = DEFAULT_STEP_COST,
        relaxation: RelaxationRule | str = RelaxationRule.STANDARD,
        verbose: bool = False,
        tick_listeners: Optional[List[TickListener]] = None,
    ):
        """Build a world and run the first ``reset()``.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            cell_size: Cell edge in pixels; must divide width and height
            wall_probability: Chance that any tile is a wall
            rng: Random source (defaults to an unseeded StdlibRandomSource)
            step_cost: Uniform edge cost used by the search and its heuristic
            relaxation: Rule for re-parenting already-open tiles
            verbose: Print generation/search progress to the console
            tick_listeners: Callables invoked after each step with
                (tick, snapshot)

        Raises:
            GridDimensionError: If the dimensions cannot form a grid
        """
        self.columns, self.rows = grid_shape(width, height, cell_size)
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.wall_probability = wall_probability
        self.rng = rng or StdlibRandomSource()
        self.step_cost = step_cost
        self.relaxation = RelaxationRule(relaxation)
        self.verbose = verbose
        self.tick_listeners = tick_listeners or []

        self.grid = TileGrid(columns=self.columns, rows=self.rows, cell_size=cell_size)
        self.start_id = 0
        self.end_id = 0
        self.spawn_position: Tuple[float, float] = (0.0, 0.0)
        self.tick = 0
        self.generation = 0
        self.last_result: Optional[SearchResult] = None

        self.reset()

    @classmethod
    def from_config(cls, config: type[Config] = Config, **overrides) -> "World":
        """Build a world from ``Config`` values; keyword overrides win."""
        config.validate()
        kwargs = {
            "wall_probability": config.WALL_PROBABILITY,
            "step_cost": config.STEP_COST,
            "relaxation": config.RELAXATION,
            "verbose": config.VERBOSE,
        }
        kwargs.update(overrides)
        return cls(config.WIDTH, config.HEIGHT, config.CELL_SIZE, **kwargs)

    @property
    def tiles(self) -> List[Tile]:
        return self.grid.tiles

    def reset(self) -> None:
        """Regenerate the grid, relink it and choose new targets.

        Fully replaces prior state, including any previous search result.
        """
        tiles = generate_tiles(
            self.width,
            self.height,
            self.cell_size,
            self.wall_probability,
            self.rng,
        )
        link_neighbors(tiles, self.columns, self.rows)
        self.grid = TileGrid(
            columns=self.columns, rows=self.rows, cell_size=self.cell_size, tiles=tiles
        )
        self.start_id, self.end_id, self.spawn_position = select_targets(
            tiles, self.cell_size, self.rng
        )
        self.tick = 0
        self.generation += 1
        self.last_result = None

        if self.verbose:
            log_deterministic(
                f"[Grid] Generation {self.generation}: {self.columns}x{self.rows} tiles, "
                f"{self.grid.wall_count()} walls"
            )
            log_info(f"[Targets] start={self.start_id} end={self.end_id} spawn={self.spawn_position}")

    def get_tile(self, node_id: int) -> Tile:
        return self.grid.get_tile(node_id)

    def tile_at(self, x: int, y: int) -> Tile:
        return self.grid.tile_at(x, y)

    def search(self) -> SearchResult:
        """Run A* from the current start to the current end."""
        if self.verbose:
            log_search(f"[Search] {self.start_id} -> {self.end_id} ({self.relaxation.value})")
        pathfinder = Pathfinder(
            self.tiles,
            step_cost=self.step_cost,
            relaxation=self.relaxation,
            verbose=self.verbose,
        )
        self.last_result = pathfinder.search(self.start_id, self.end_id)
        return self.last_result

    @property
    def path(self) -> List[int]:
        """Latest found path (start -> end), empty when none or not searched."""
        if self.last_result is None or not self.last_result.found:
            return []
        return list(self.last_result.path)

    def step(self) -> WorldSnapshot:
        """Advance one host tick and return the snapshot to render.

        The search runs lazily on the first step after a reset; later steps
        reuse its result until the next reset.
        """
        if self.last_result is None:
            self.search()
        self.tick += 1
        snapshot = self.snapshot()
        for listener in self.tick_listeners:
            listener(self.tick, snapshot)
        return snapshot

    def snapshot(self) -> WorldSnapshot:
        search = None
        if self.last_result is not None:
            search = SearchSummary(
                start_id=self.last_result.start_id,
                end_id=self.last_result.end_id,
                found=self.last_result.found,
                path=list(self.last_result.path),
                closed_order=list(self.last_result.closed_order),
                iterations=self.last_result.iterations,
                relaxation=self.relaxation.value,
            )
        return WorldSnapshot(
            tick=self.tick,
            generation=self.generation,
            start_id=self.start_id,
            end_id=self.end_id,
            spawn_position=self.spawn_position,
            grid=GridState.from_tiles(
                self.tiles, columns=self.columns, rows=self.rows, cell_size=self.cell_size
            ),
            search=search,
        )
