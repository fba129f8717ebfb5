"""
Pathgrid Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


REACHABILITY_PRESETS = ("four", "eight")
STRATEGY_NAMES = ("bfs", "dfs_recursive", "dfs_iterative", "astar")


class Config:
    """Application configuration loaded from environment variables."""

    # Editor grid dimensions
    DEFAULT_WIDTH: int = int(os.getenv("PATHGRID_DEFAULT_WIDTH", "20"))
    DEFAULT_HEIGHT: int = int(os.getenv("PATHGRID_DEFAULT_HEIGHT", "20"))
    # Upper bound the editor accepts on resize requests
    MAX_GRID_SIZE: int = int(os.getenv("PATHGRID_MAX_GRID_SIZE", "100"))

    # Brush: side length is 2 * layers - 1
    MAX_BRUSH_LAYERS: int = int(os.getenv("PATHGRID_MAX_BRUSH_LAYERS", "5"))

    # Search defaults
    REACHABILITY: str = os.getenv("PATHGRID_REACHABILITY", "four").lower()
    STRATEGY: str = os.getenv("PATHGRID_STRATEGY", "bfs").lower()

    # Logging
    VERBOSE: bool = os.getenv("PATHGRID_VERBOSE", "").lower() in ("1", "true", "yes", "on")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are inconsistent."""
        if cls.DEFAULT_WIDTH <= 0 or cls.DEFAULT_HEIGHT <= 0:
            raise ValueError(
                "PATHGRID_DEFAULT_WIDTH and PATHGRID_DEFAULT_HEIGHT must be greater than 0"
            )

        if cls.MAX_GRID_SIZE <= 0:
            raise ValueError("PATHGRID_MAX_GRID_SIZE must be greater than 0")

        if cls.DEFAULT_WIDTH > cls.MAX_GRID_SIZE or cls.DEFAULT_HEIGHT > cls.MAX_GRID_SIZE:
            raise ValueError(
                f"Default grid size {cls.DEFAULT_WIDTH}x{cls.DEFAULT_HEIGHT} exceeds "
                f"PATHGRID_MAX_GRID_SIZE ({cls.MAX_GRID_SIZE})"
            )

        if cls.MAX_BRUSH_LAYERS < 1:
            raise ValueError("PATHGRID_MAX_BRUSH_LAYERS must be at least 1")

        if cls.REACHABILITY not in REACHABILITY_PRESETS:
            raise ValueError(
                f"PATHGRID_REACHABILITY must be one of {', '.join(REACHABILITY_PRESETS)}, "
                f"got '{cls.REACHABILITY}'"
            )

        if cls.STRATEGY not in STRATEGY_NAMES:
            raise ValueError(
                f"PATHGRID_STRATEGY must be one of {', '.join(STRATEGY_NAMES)}, "
                f"got '{cls.STRATEGY}'"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Pathgrid Configuration:",
            f"  Default Size: {cls.DEFAULT_WIDTH}x{cls.DEFAULT_HEIGHT}",
            f"  Max Grid Size: {cls.MAX_GRID_SIZE}",
            f"  Max Brush Layers: {cls.MAX_BRUSH_LAYERS}",
            f"  Reachability: {cls.REACHABILITY}",
            f"  Strategy: {cls.STRATEGY}",
            f"  Verbose: {cls.VERBOSE}",
        ]
        return "\n".join(lines)
