"""
bindtree - schema-directed parser and canonical printer for binding notation.

Binding notation encodes command-like data as 'name=value' pairs, where a
value may open a block of further bindings: 'git=add{verbose=true path=a,b}'.
"""

__version__ = "0.1.0"

from bindtree.config import BindtreeConfig, get_config
from bindtree.decoder import SchemaDecoder, decode, decode_value_text, loads
from bindtree.encoder import dumps, encode
from bindtree.errors import (
    BindtreeError,
    DecodeError,
    EncodeError,
    ParseError,
    SchemaError,
)
from bindtree.lexer import Token, TokenType, TreeLexer
from bindtree.parser import (
    TreeParser,
    parse_binding,
    parse_document,
    parse_value,
    parse_value_document,
)
from bindtree.printer import canonicalize, print_binding, print_value
from bindtree.schema import (
    BOOL,
    STRING,
    BoolSchema,
    EnumSchema,
    Field,
    Schema,
    StringSchema,
    StructSchema,
    Variant,
    enum,
    struct,
)
from bindtree.tree import Binding, Value
from bindtree.values import (
    BoolValue,
    EnumValue,
    FieldValue,
    StringValue,
    StructValue,
    TypedValue,
    VariantValue,
)

__all__ = [
    "__version__",
    # Config
    "BindtreeConfig",
    "get_config",
    # Errors
    "BindtreeError",
    "ParseError",
    "DecodeError",
    "EncodeError",
    "SchemaError",
    # Lexer
    "TreeLexer",
    "Token",
    "TokenType",
    # Tree
    "Binding",
    "Value",
    # Parser
    "TreeParser",
    "parse_binding",
    "parse_value",
    "parse_document",
    "parse_value_document",
    # Printer
    "print_binding",
    "print_value",
    "canonicalize",
    # Schema
    "Schema",
    "StringSchema",
    "BoolSchema",
    "StructSchema",
    "EnumSchema",
    "Field",
    "Variant",
    "STRING",
    "BOOL",
    "struct",
    "enum",
    # Typed values
    "TypedValue",
    "StringValue",
    "BoolValue",
    "StructValue",
    "EnumValue",
    "FieldValue",
    "VariantValue",
    # Decoding and encoding
    "SchemaDecoder",
    "decode",
    "decode_value_text",
    "loads",
    "encode",
    "dumps",
]
