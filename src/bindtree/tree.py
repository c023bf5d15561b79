"""
Untyped tree produced by the binding parser.

A Binding holds one or more Values; a Value holds a token and an optional
block of further Bindings. Nothing here knows about schemas.
"""

from dataclasses import dataclass

from bindtree.lexer import is_identifier


@dataclass(frozen=True)
class Value:
    """A token with an optional nested block (e.g. 'add{verbose=true}')."""

    token: str
    children: tuple["Binding", ...] = ()

    def __post_init__(self):
        if not is_identifier(self.token):
            raise ValueError(f"Value token must be alphanumeric, got {self.token!r}")
        # Lists are accepted for convenience and frozen here
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class Binding:
    """A name bound to one or more comma-separated values (e.g. 'foo=a,b')."""

    name: str
    values: tuple[Value, ...]

    def __post_init__(self):
        if not is_identifier(self.name):
            raise ValueError(f"Binding name must be alphanumeric, got {self.name!r}")
        object.__setattr__(self, "values", tuple(self.values))
        if not self.values:
            raise ValueError(f"Binding {self.name!r} needs at least one value")

    @property
    def value(self) -> Value:
        """The first value; convenient for single-valued bindings."""
        return self.values[0]


def depth(node: Binding | Value) -> int:
    """Number of nested blocks below a node (0 for a plain 'a=b')."""
    if isinstance(node, Binding):
        return max([depth(value) for value in node.values])
    if not node.children:
        return 0
    return 1 + max([depth(child) for child in node.children])
