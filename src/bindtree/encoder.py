"""
Encoder from typed values back to binding notation.

encode() is the inverse of decoding: decode(schema, encode(value)) gives
back value for anything decode produced.
"""

from bindtree.errors import EncodeError
from bindtree.lexer import is_identifier
from bindtree.printer import print_value
from bindtree.tree import Binding, Value
from bindtree.values import (
    BoolValue,
    EnumValue,
    FieldValue,
    StringValue,
    StructValue,
    TypedValue,
)

DEFAULT_STRUCT_TOKEN = "root"


def encode(typed: TypedValue, token: str = DEFAULT_STRUCT_TOKEN) -> Value:
    """Build the untyped tree for a typed value.

    Args:
        typed: The value to encode.
        token: Token written in front of a top-level struct's block. Struct
            fields use their field name instead.

    Raises:
        EncodeError: If a string or name is not a valid token.
    """
    if isinstance(typed, StringValue):
        return Value(token=_token(typed.text))

    if isinstance(typed, BoolValue):
        return Value(token="true" if typed.flag else "false")

    if isinstance(typed, StructValue):
        return Value(token=_token(token), children=_encode_fields(typed.fields))

    if isinstance(typed, EnumValue):
        variant = typed.variant
        body = variant.value
        if isinstance(body, StructValue):
            children = _encode_fields(body.fields)
        else:
            children = (Binding(name=_token(variant.name), values=(encode(body, variant.name),)),)
        return Value(token=_token(variant.name), children=children)

    raise TypeError(f"Unsupported value kind: {typed!r}")


def _encode_fields(fields: tuple[FieldValue, ...]) -> tuple[Binding, ...]:
    # One binding per occurrence so repeated fields stay repeated bindings
    return tuple(
        [Binding(name=_token(fv.name), values=(encode(fv.value, fv.name),)) for fv in fields]
    )


def _token(text: str) -> str:
    if not is_identifier(text):
        raise EncodeError(f"Cannot encode {text!r}: tokens must be non-empty and alphanumeric")
    return text


def dumps(typed: TypedValue, token: str = DEFAULT_STRUCT_TOKEN) -> str:
    """Encode a typed value and print it in canonical form."""
    return print_value(encode(typed, token))
