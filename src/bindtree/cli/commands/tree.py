"""Commands working on the untyped tree: `bindtree normalize`, `bindtree show`."""

import sys
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.tree import Tree

from bindtree.cli.app import app
from bindtree.config import MAX_DEPTH_LIMIT
from bindtree.errors import ParseError
from bindtree.parser import parse_document
from bindtree.printer import print_binding
from bindtree.tree import Binding, depth

console = Console()

TextArgument = Annotated[
    Optional[str],
    typer.Argument(help="Document to read; standard input is used when omitted"),
]
MaxDepthOption = Annotated[
    Optional[int],
    typer.Option(
        "--max-depth", min=1, max=MAX_DEPTH_LIMIT, help="Deepest block nesting to accept"
    ),
]


def _read_document(text: Optional[str], max_depth: Optional[int]) -> Binding:
    if text is None:
        text = sys.stdin.read()
    try:
        return parse_document(text, max_depth=max_depth)
    except ParseError as e:
        logger.debug(f"Parse failed: expected {e.expected}, found {e.found}")
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(1)


def _add_binding(parent: Tree, binding: Binding):
    node = parent.add(f"[cyan]{binding.name}[/cyan]")
    for value in binding.values:
        value_node = node.add(f"[green]{value.token}[/green]")
        for child in value.children:
            _add_binding(value_node, child)


@app.command()
def normalize(text: TextArgument = None, max_depth: MaxDepthOption = None):
    """Print a document in canonical form.

    Whitespace is normalized so that equal trees always print identically,
    e.g. 'foo=bar { zoo=qat }' becomes 'foo=bar{zoo=qat}'.
    """
    binding = _read_document(text, max_depth)
    typer.echo(print_binding(binding))


@app.command()
def show(text: TextArgument = None, max_depth: MaxDepthOption = None):
    """Display the parsed tree of a document."""
    binding = _read_document(text, max_depth)
    root = Tree(f"[bold]{print_binding(binding)}[/bold] (depth {depth(binding)})")
    _add_binding(root, binding)
    console.print(root)
