"""
Canonical printer for untyped binding trees.

The canonical form has no whitespace except the single space separating
sibling bindings inside a block: 'a=b{c=d e=f},g'. Parsing the printed text
gives back the same tree.
"""

from bindtree.parser import parse_document
from bindtree.tree import Binding, Value


def print_value(value: Value) -> str:
    """Render a value, omitting the block when it has no children."""
    if not value.children:
        return value.token
    body = " ".join([print_binding(child) for child in value.children])
    return f"{value.token}{{{body}}}"


def print_binding(binding: Binding) -> str:
    """Render a binding with its values joined by commas."""
    return f"{binding.name}=" + ",".join([print_value(value) for value in binding.values])


def canonicalize(text: str, max_depth: int | None = None) -> str:
    """Normalize a document to its canonical form."""
    return print_binding(parse_document(text, max_depth=max_depth))
