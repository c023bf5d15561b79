"""Schema model for typed decoding.

A schema is a closed union of four kinds:

  StringSchema              -> any token, decoded as text
  BoolSchema                -> the token 'true' or 'false'
  StructSchema(fields)      -> a block of named fields, some repeated
  EnumSchema(variants)      -> a token naming one variant, plus its body

Schemas nest freely and are built in code; there is no schema file format.
"""

from dataclasses import dataclass

from bindtree.errors import SchemaError
from bindtree.lexer import is_identifier


# --- Leaf kinds ---


@dataclass(frozen=True)
class StringSchema:
    """Leaf accepting any token."""

    pass


@dataclass(frozen=True)
class BoolSchema:
    """Leaf accepting 'true' or 'false'."""

    pass


# --- Composite kinds ---


@dataclass(frozen=True)
class Field:
    """A named slot within a StructSchema.

    A repeated field collects every occurrence in order. A non-repeated field
    accepts at most one value, and must be present when required.
    """

    name: str
    schema: "Schema"
    repeated: bool = False
    required: bool = False


@dataclass(frozen=True)
class Variant:
    """A named alternative within an EnumSchema."""

    name: str
    schema: "Schema"


@dataclass(frozen=True)
class StructSchema:
    """A block of named fields."""

    fields: tuple[Field, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))
        _check_names("field", [f.name for f in self.fields])

    def field(self, name: str) -> Field | None:
        """Look up a field by name."""
        for candidate in self.fields:
            if candidate.name == name:
                return candidate
        return None

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]


@dataclass(frozen=True)
class EnumSchema:
    """A choice between named variants."""

    variants: tuple[Variant, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "variants", tuple(self.variants))
        _check_names("variant", [v.name for v in self.variants])

    def variant(self, name: str) -> Variant | None:
        """Look up a variant by name."""
        for candidate in self.variants:
            if candidate.name == name:
                return candidate
        return None

    @property
    def variant_names(self) -> list[str]:
        return [v.name for v in self.variants]


type Schema = StringSchema | BoolSchema | StructSchema | EnumSchema

STRING = StringSchema()
BOOL = BoolSchema()


def _check_names(kind: str, names: list[str]):
    seen: set[str] = set()
    for name in names:
        if not is_identifier(name):
            raise SchemaError(f"Invalid {kind} name {name!r}: must be alphanumeric")
        if name in seen:
            raise SchemaError(f"Duplicate {kind} name {name!r}")
        seen.add(name)


# --- Constructors ---


def struct(*fields: Field) -> StructSchema:
    """Build a StructSchema from fields, e.g. struct(Field("force", BOOL))."""
    return StructSchema(fields=fields)


def enum(*variants: Variant) -> EnumSchema:
    """Build an EnumSchema from variants."""
    return EnumSchema(variants=variants)
