"""Scene-file parsing, map checking and raycasting helpers for grid-based games."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "config",
    "errors",
    "extract",
    "geometry",
    "linereader",
    "mapcheck",
    "player",
    "raster",
    "strutil",
]