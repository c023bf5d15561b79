"""Schema-directed decoder for binding trees.

Walks an untyped tree alongside a schema and builds the typed value tree:

  Schema Kind     -> Accepted Input
  -----------------------------------------------
  StringSchema    -> any token, no block
  BoolSchema      -> token 'true' or 'false', no block
  StructSchema    -> token (not retained) + block of declared fields
  EnumSchema      -> token naming a variant + the variant's body

Decoding is strict: unknown fields, unknown variants, extra values for a
non-repeated field, and blocks on leaves are all errors. The first error
aborts the whole decode; no partial values are returned.
"""

from loguru import logger

from bindtree.config import resolve_max_depth
from bindtree.errors import DecodeError
from bindtree.parser import parse_document, parse_value_document
from bindtree.schema import BoolSchema, EnumSchema, Schema, StringSchema, StructSchema, Variant
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

BOOL_LITERALS = {"true": True, "false": False}

type Path = tuple[str, ...]


class SchemaDecoder:
    """Decoder for one schema-directed pass over a tree."""

    def __init__(self, max_depth: int | None = None):
        self.max_depth = resolve_max_depth(max_depth)

    def decode(self, schema: Schema, tree: Binding | Value) -> TypedValue:
        """Decode a Value, or the single value of a Binding, against schema."""
        if isinstance(tree, Binding):
            path = (tree.name,)
            value = self._single_value(tree, path)
            return self._decode_value(schema, value, path, 0)
        return self._decode_value(schema, tree, (), 0)

    def _decode_value(self, schema: Schema, value: Value, path: Path, depth: int) -> TypedValue:
        logger.trace(f"Decoding {value.token!r} as {type(schema).__name__} at {_render(path)}")

        if isinstance(schema, StringSchema):
            self._reject_block(value, "string", path)
            return StringValue(text=value.token)

        if isinstance(schema, BoolSchema):
            self._reject_block(value, "boolean", path)
            if value.token not in BOOL_LITERALS:
                raise DecodeError(
                    f"Invalid boolean {value.token!r}: expected 'true' or 'false'", path
                )
            return BoolValue(flag=BOOL_LITERALS[value.token])

        if isinstance(schema, StructSchema):
            self._check_depth(value, path, depth)
            return self._decode_struct(schema, value.children, path, depth + 1)

        if isinstance(schema, EnumSchema):
            variant = schema.variant(value.token)
            if variant is None:
                expected = ", ".join(schema.variant_names) or "no variants"
                raise DecodeError(
                    f"Unknown variant {value.token!r}; expected one of: {expected}", path
                )
            variant_path = path + (variant.name,)
            self._check_depth(value, variant_path, depth)
            body = self._decode_body(variant, value.children, variant_path, depth + 1)
            return EnumValue(variant=VariantValue(name=variant.name, value=body))

        raise TypeError(f"Unsupported schema kind: {schema!r}")

    def _decode_struct(
        self,
        schema: StructSchema,
        bindings: tuple[Binding, ...],
        path: Path,
        depth: int,
    ) -> StructValue:
        """Decode a block of bindings against the fields of a struct."""
        fields: list[FieldValue] = []
        counts: dict[str, int] = {}

        for binding in bindings:
            field = schema.field(binding.name)
            if field is None:
                expected = ", ".join(schema.field_names) or "no fields"
                raise DecodeError(
                    f"Unknown field {binding.name!r}; expected one of: {expected}",
                    path + (binding.name,),
                )

            for value in binding.values:
                index = counts.get(field.name, 0)
                # Trigger: a second value for a single-valued field
                # Why: 'force=true,false' and 'force=true force=false' are both ambiguous
                # Outcome: arity error naming the field
                if index and not field.repeated:
                    raise DecodeError(
                        f"Field {field.name!r} accepts a single value but was given more",
                        path + (field.name,),
                    )
                segment = f"{field.name}[{index}]" if field.repeated else field.name
                decoded = self._decode_value(field.schema, value, path + (segment,), depth)
                fields.append(
                    FieldValue(name=field.name, value=decoded, repeated=field.repeated)
                )
                counts[field.name] = index + 1

        for field in schema.fields:
            if field.required and not counts.get(field.name):
                raise DecodeError(f"Missing required field {field.name!r}", path)

        return StructValue(fields=tuple(fields))

    def _decode_body(
        self,
        variant: Variant,
        bindings: tuple[Binding, ...],
        path: Path,
        depth: int,
    ) -> TypedValue:
        """Decode the block following a variant token.

        A struct variant reads the block as its fields. Any other variant
        reads a single binding named after itself, e.g. 'say{say=hello}'.
        """
        if isinstance(variant.schema, StructSchema):
            return self._decode_struct(variant.schema, bindings, path, depth)

        if len(bindings) != 1 or bindings[0].name != variant.name:
            raise DecodeError(
                f"Variant {variant.name!r} expects a block with a single "
                f"'{variant.name}=...' binding",
                path,
            )
        value = self._single_value(bindings[0], path)
        return self._decode_value(variant.schema, value, path, depth)

    # Helper methods

    def _single_value(self, binding: Binding, path: Path) -> Value:
        if len(binding.values) != 1:
            raise DecodeError(
                f"Expected exactly one value for {binding.name!r}, got {len(binding.values)}",
                path,
            )
        return binding.values[0]

    def _reject_block(self, value: Value, kind: str, path: Path):
        if value.children:
            raise DecodeError(f"A {kind} value cannot carry a block", path)

    def _check_depth(self, value: Value, path: Path, depth: int):
        if value.children and depth + 1 > self.max_depth:
            raise DecodeError(f"Block nesting exceeds maximum depth of {self.max_depth}", path)


def _render(path: Path) -> str:
    return ".".join(path) or "<root>"


def decode(schema: Schema, tree: Binding | Value, max_depth: int | None = None) -> TypedValue:
    """Decode an untyped tree against a schema.

    Args:
        schema: The schema describing the expected shape.
        tree: A parsed Value, or a Binding carrying exactly one value.
        max_depth: Nesting limit; defaults to the configured limit.

    Returns:
        The typed value mirroring the schema.

    Raises:
        DecodeError: If the tree does not match the schema.
    """
    result = SchemaDecoder(max_depth=max_depth).decode(schema, tree)
    logger.debug(f"Decoded {type(result).__name__} from {type(tree).__name__}")
    return result


def loads(schema: Schema, text: str, max_depth: int | None = None) -> TypedValue:
    """Parse a one-binding document and decode it, e.g. 'git=add{verbose=true}'."""
    return decode(schema, parse_document(text, max_depth=max_depth), max_depth=max_depth)


def decode_value_text(schema: Schema, text: str, max_depth: int | None = None) -> TypedValue:
    """Parse a bare value and decode it, e.g. 'add{verbose=true}'."""
    return decode(schema, parse_value_document(text, max_depth=max_depth), max_depth=max_depth)
