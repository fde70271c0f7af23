"""
tilemaze Configuration

Loads configuration from environment variables with sensible defaults.
Defaults reproduce the visualizer canvas: 900x600 rendered
at 2x quality and cut into 50px cells.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Config:
    """Application configuration loaded from environment variables."""

    # Canvas / grid geometry
    QUALITY: int = int(os.getenv("TILEMAZE_QUALITY", "2"))
    WIDTH: int = int(os.getenv("TILEMAZE_WIDTH", str(900 * QUALITY)))
    HEIGHT: int = int(os.getenv("TILEMAZE_HEIGHT", str(600 * QUALITY)))
    CELL_SIZE: int = int(os.getenv("TILEMAZE_CELL_SIZE", "50"))

    # Generation: 30% walls means a tile is a wall when its draw is >= 0.7
    WALL_PROBABILITY: float = float(os.getenv("TILEMAZE_WALL_PROBABILITY", "0.3"))

    # Search
    STEP_COST: int = int(os.getenv("TILEMAZE_STEP_COST", "10"))
    # 'standard' updates open nodes when a cheaper route appears; 'frozen' never does
    RELAXATION: str = os.getenv("TILEMAZE_RELAXATION", "standard").lower()

    # Host loop
    DEBUG: bool = _env_flag("TILEMAZE_DEBUG")
    RENDER_INTERVAL_MS: int = int(os.getenv("TILEMAZE_RENDER_INTERVAL_MS", "100"))

    # Logging
    VERBOSE: bool = _env_flag("TILEMAZE_VERBOSE")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are inconsistent."""
        if cls.CELL_SIZE <= 0 or cls.WIDTH <= 0 or cls.HEIGHT <= 0:
            raise ValueError(
                "TILEMAZE_WIDTH, TILEMAZE_HEIGHT and TILEMAZE_CELL_SIZE must be positive"
            )

        if cls.WIDTH % cls.CELL_SIZE or cls.HEIGHT % cls.CELL_SIZE:
            raise ValueError(
                f"Canvas {cls.WIDTH}x{cls.HEIGHT} is not divisible by cell size {cls.CELL_SIZE}. "
                "Pick a TILEMAZE_CELL_SIZE that divides both dimensions."
            )

        if not 0.0 <= cls.WALL_PROBABILITY <= 1.0:
            raise ValueError("TILEMAZE_WALL_PROBABILITY must be between 0 and 1")

        if cls.STEP_COST <= 0:
            raise ValueError("TILEMAZE_STEP_COST must be positive")

        if cls.RELAXATION not in ("standard", "frozen"):
            raise ValueError(
                f"Unknown TILEMAZE_RELAXATION '{cls.RELAXATION}'. Use 'standard' or 'frozen'."
            )

        if cls.RENDER_INTERVAL_MS <= 0:
            raise ValueError("TILEMAZE_RENDER_INTERVAL_MS must be positive")

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "tilemaze Configuration:",
            f"  Canvas: {cls.WIDTH}x{cls.HEIGHT} (quality {cls.QUALITY})",
            f"  Cell Size: {cls.CELL_SIZE}",
            f"  Grid: {cls.WIDTH // cls.CELL_SIZE}x{cls.HEIGHT // cls.CELL_SIZE} tiles",
            f"  Wall Probability: {cls.WALL_PROBABILITY:.2f}",
            f"  Step Cost: {cls.STEP_COST}",
            f"  Relaxation: {cls.RELAXATION}",
            f"  Host Tick: {'interval ' + str(cls.RENDER_INTERVAL_MS) + 'ms' if cls.DEBUG else 'request'}",
        ]
        return "\n".join(lines)
