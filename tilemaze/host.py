"""Host tick cadence settings.

The core never schedules itself. A host (browser canvas, terminal runner,
game loop) calls ``World.step()`` and decides how often. These helpers record
the two cadences the visualizer supports so hosts do not have to duplicate the
bookkeeping: a fixed interval while debugging, otherwise one step per frame
request.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .config import Config


class TickMode(str, Enum):
    INTERVAL = "interval"
    REQUEST = "request"


@dataclass(frozen=True)
class HostSettings:
    """How a host should drive ``World.step()``."""

    debug: bool = False
    render_interval_ms: int = 100

    @property
    def tick_mode(self) -> TickMode:
        """Debug hosts tick on a fixed interval; others tick per frame request."""
        return TickMode.INTERVAL if self.debug else TickMode.REQUEST

    @property
    def interval_seconds(self) -> float:
        return self.render_interval_ms / 1000.0

    @classmethod
    def from_config(cls, config: type[Config] = Config) -> "HostSettings":
        return cls(debug=config.DEBUG, render_interval_ms=config.RENDER_INTERVAL_MS)
