"""
Maze Host Runner
================

WHAT THIS SHOWS:
- A host driving World.step() on its own cadence
- Interval ticks in debug mode, back-to-back "frame request" ticks otherwise
- Regenerating the grid every few steps with reset()
- Reading the snapshot a renderer would draw (walls, start, end, path)

The core never draws; this runner plays the renderer with ASCII.

RUN:
    python -m examples.maze.run
    TILEMAZE_DEBUG=true TILEMAZE_RENDER_INTERVAL_MS=500 python -m examples.maze.run
"""

import time

from tilemaze import HostSettings, TickMode, World, WorldSnapshot
from tilemaze.config import Config
from tilemaze.logging_utils import Color, colored, log_error, log_info, log_success

STEPS = 6
STEPS_PER_GRID = 2


def render_ascii(snapshot: WorldSnapshot) -> str:
    """Draw the snapshot: # wall, S start, E end, * path, . floor."""
    path = set(snapshot.search.path) if snapshot.search and snapshot.search.found else set()
    lines = []
    for row in range(snapshot.grid.rows):
        chars = []
        for col in range(snapshot.grid.columns):
            tile = snapshot.grid.tiles[row * snapshot.grid.columns + col]
            if tile.node_id == snapshot.start_id:
                chars.append("S")
            elif tile.node_id == snapshot.end_id:
                chars.append("E")
            elif tile.is_wall:
                chars.append("#")
            elif tile.node_id in path:
                chars.append("*")
            else:
                chars.append(".")
        lines.append(" ".join(chars))
    return "\n".join(lines)


def on_tick(tick: int, snapshot: WorldSnapshot) -> None:
    if snapshot.search and snapshot.search.found:
        log_success(f"Tick {tick}: path of {snapshot.search.edge_count} steps")
    else:
        log_error(f"Tick {tick}: end tile {snapshot.end_id} is unreachable")


def main() -> None:
    print(colored(Config.display(), Color.CYAN, bold=True))
    settings = HostSettings.from_config()
    world = World.from_config(tick_listeners=[on_tick])
    log_info(f"Host cadence: {settings.tick_mode.value}")

    for step in range(STEPS):
        if step and step % STEPS_PER_GRID == 0:
            world.reset()
        snapshot = world.step()
        if snapshot.tick == 1:
            walls = snapshot.grid.wall_ids()
            log_info(f"Generation {snapshot.generation}: {len(walls)} walls")
            print(render_ascii(snapshot))
        if settings.tick_mode is TickMode.INTERVAL:
            time.sleep(settings.interval_seconds)


if __name__ == "__main__":
    main()
