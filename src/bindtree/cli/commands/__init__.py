"""CLI commands for bindtree."""

from . import tree

__all__ = ["tree"]
