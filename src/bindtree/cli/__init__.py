"""Command line interface for bindtree."""
