"""Top-level package for filecheck."""

__version__ = "1.0.0"

__all__ = [
    "actions",
    "cli",
    "configs",
    "validation",
]
