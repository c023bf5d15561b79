"""
Lexical analyzer (tokenizer) for binding notation.
"""

import string
from dataclasses import dataclass
from enum import Enum, auto

WHITESPACE = frozenset(" \t\r\n\v\f")
IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits)


class TokenType(Enum):
    """Token types for binding notation."""

    IDENTIFIER = auto()

    # Punctuation
    EQUALS = auto()  # =
    COMMA = auto()  # ,
    LBRACE = auto()  # {
    RBRACE = auto()  # }

    # Special
    INVALID = auto()  # any other character, reported by the parser if reached
    EOF = auto()


PUNCTUATION = {
    "=": TokenType.EQUALS,
    ",": TokenType.COMMA,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}


@dataclass(frozen=True)
class Token:
    """A token in a binding document."""

    type: TokenType
    value: str
    offset: int
    line: int
    column: int
    spaced: bool = False  # whitespace directly precedes this token

    def describe(self) -> str:
        """Human readable form used in error messages."""
        if self.type == TokenType.EOF:
            return "end of input"
        return repr(self.value)

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


class TreeLexer:
    """Tokenizer for binding notation."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the entire input.

        Never raises: characters outside the notation become INVALID tokens so
        that a parser consuming only a prefix of the text can stop before them.
        """
        while True:
            spaced = self._skip_whitespace()
            if self.pos >= len(self.text):
                break
            self._tokenize_one(spaced)

        self.tokens.append(Token(TokenType.EOF, "", self.pos, self.line, self.column, spaced))
        return self.tokens

    def _tokenize_one(self, spaced: bool):
        char = self.text[self.pos]
        if char in IDENTIFIER_CHARS:
            self._match_identifier(spaced)
            return

        token_type = PUNCTUATION.get(char, TokenType.INVALID)
        self.tokens.append(Token(token_type, char, self.pos, self.line, self.column, spaced))
        self.pos += 1
        self.column += 1

    def _skip_whitespace(self) -> bool:
        """Skip whitespace but track newlines. Returns True if anything was skipped."""
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE:
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1
        return self.pos > start

    def _match_identifier(self, spaced: bool):
        start_pos = self.pos
        start_col = self.column
        while self.pos < len(self.text) and self.text[self.pos] in IDENTIFIER_CHARS:
            self.pos += 1
            self.column += 1

        value = self.text[start_pos : self.pos]
        self.tokens.append(
            Token(TokenType.IDENTIFIER, value, start_pos, self.line, start_col, spaced)
        )


def is_identifier(text: str) -> bool:
    """Check that text is a non-empty run of ASCII letters and digits."""
    return bool(text) and all(char in IDENTIFIER_CHARS for char in text)
