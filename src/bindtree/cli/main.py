"""Main CLI entry point for bindtree."""  # pragma: no cover

from bindtree.cli.app import app  # pragma: no cover

# Register commands
from bindtree.cli.commands import tree  # noqa: F401  # pragma: no cover

if __name__ == "__main__":  # pragma: no cover
    app()
