"""
Parser for binding notation.

Converts tokens into an untyped tree of Bindings and Values:

    binding  := Identifier "=" value ("," ws* value)*
    value    := Identifier ws* block?
    block    := "{" ws* (binding (ws+ binding)*)? ws* "}" ws*
"""

from loguru import logger

from bindtree.config import resolve_max_depth
from bindtree.errors import ParseError
from bindtree.lexer import Token, TokenType, TreeLexer
from bindtree.tree import Binding, Value


class TreeParser:
    """Recursive-descent parser for binding notation."""

    def __init__(self, text: str, tokens: list[Token], max_depth: int | None = None):
        self.text = text
        self.tokens = tokens
        self.pos = 0
        self.max_depth = resolve_max_depth(max_depth)

    @classmethod
    def from_text(cls, text: str, max_depth: int | None = None) -> "TreeParser":
        lexer = TreeLexer(text)
        return cls(text, lexer.tokenize(), max_depth=max_depth)

    @classmethod
    def parse(cls, text: str, max_depth: int | None = None) -> Binding:
        """Parse a complete document consisting of exactly one binding."""
        parser = cls.from_text(text, max_depth=max_depth)
        binding = parser.parse_binding()
        parser.expect_end()
        return binding

    def remaining(self) -> str:
        """Text not yet consumed, starting at the next token."""
        return self.text[self._current().offset :]

    def expect_end(self):
        if not self._is_at_end():
            raise self._error("Unexpected trailing input", expected="end of input")

    def parse_binding(self, depth: int = 0) -> Binding:
        """Parse 'name=value(,value)*'."""
        name = self._expect_identifier("binding name")

        if not self._check(TokenType.EQUALS):
            raise self._error(f"Expected '=' after {name.value!r}", expected="'='")
        if self._current().spaced:
            raise self._error(
                f"Unexpected whitespace between {name.value!r} and '='", expected="'='"
            )
        self._advance()

        if self._current().spaced:
            raise self._error(f"Unexpected whitespace after '{name.value}='", expected="value")
        values = [self.parse_value(depth)]

        while self._check(TokenType.COMMA):
            self._advance()
            values.append(self.parse_value(depth))

        return Binding(name=name.value, values=tuple(values))

    def parse_value(self, depth: int = 0) -> Value:
        """Parse a token with an optional block of bindings."""
        token = self._expect_identifier("value")

        children: tuple[Binding, ...] = ()
        if self._check(TokenType.LBRACE):
            children = self._parse_block(depth + 1)

        return Value(token=token.value, children=children)

    def _parse_block(self, depth: int) -> tuple[Binding, ...]:
        """Parse '{ binding binding ... }'."""
        if depth > self.max_depth:
            raise self._error(f"Block nesting exceeds maximum depth of {self.max_depth}")
        opening = self._advance()

        bindings: list[Binding] = []
        if self._check(TokenType.IDENTIFIER):
            bindings.append(self.parse_binding(depth))
            # Sibling bindings are separated by whitespace, never by commas
            while self._check(TokenType.IDENTIFIER):
                if not self._current().spaced:
                    raise self._error(
                        "Expected whitespace between bindings", expected="whitespace"
                    )
                bindings.append(self.parse_binding(depth))

        if self._is_at_end():
            raise self._error(
                f"Unterminated block opened at line {opening.line}, column {opening.column}",
                expected="'}'",
            )
        if not self._check(TokenType.RBRACE):
            raise self._error("Expected binding or '}' in block", expected="'}'")
        self._advance()

        return tuple(bindings)

    # Helper methods

    def _expect_identifier(self, what: str) -> Token:
        if not self._check(TokenType.IDENTIFIER):
            raise self._error(f"Expected {what}", expected=what)
        return self._advance()

    def _error(self, message: str, expected: str | None = None) -> ParseError:
        token = self._current()
        found = token.describe()
        if expected is not None:
            message = f"{message}, found {found}"
        return ParseError(
            message,
            offset=token.offset,
            line=token.line,
            column=token.column,
            expected=expected,
            found=found,
        )

    def _current(self) -> Token:
        """Get the current token."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self.tokens[-1]  # Return EOF

    def _advance(self) -> Token:
        """Advance to the next token."""
        token = self._current()
        if not self._is_at_end():
            self.pos += 1
        return token

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches the given type."""
        return self._current().type == token_type

    def _is_at_end(self) -> bool:
        return self._current().type == TokenType.EOF


def parse_binding(text: str, max_depth: int | None = None) -> tuple[Binding, str]:
    """Parse one binding from the start of text.

    Returns:
        The binding and the text left after it (empty when fully consumed).

    Raises:
        ParseError: If the start of text is not a binding.
    """
    parser = TreeParser.from_text(text, max_depth=max_depth)
    binding = parser.parse_binding()
    return binding, parser.remaining()


def parse_value(text: str, max_depth: int | None = None) -> tuple[Value, str]:
    """Parse one value (token plus optional block) from the start of text."""
    parser = TreeParser.from_text(text, max_depth=max_depth)
    value = parser.parse_value()
    return value, parser.remaining()


def parse_document(text: str, max_depth: int | None = None) -> Binding:
    """Parse text that must consist of exactly one binding."""
    binding = TreeParser.parse(text, max_depth=max_depth)
    logger.debug(f"Parsed binding {binding.name!r} with {len(binding.values)} value(s)")
    return binding


def parse_value_document(text: str, max_depth: int | None = None) -> Value:
    """Parse text that must consist of exactly one value, e.g. 'add{verbose=true}'."""
    parser = TreeParser.from_text(text, max_depth=max_depth)
    value = parser.parse_value()
    parser.expect_end()
    logger.debug(f"Parsed value {value.token!r} with {len(value.children)} binding(s)")
    return value
