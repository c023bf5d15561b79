"""
Typed values produced by decoding a tree against a schema.

Each kind mirrors a schema kind: a BoolValue only appears where the schema
said BoolSchema, and so on.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StringValue:
    """Decoded string leaf."""

    text: str

    def to_python(self) -> str:
        return self.text


@dataclass(frozen=True)
class BoolValue:
    """Decoded boolean leaf."""

    flag: bool

    def to_python(self) -> bool:
        return self.flag


@dataclass(frozen=True)
class FieldValue:
    """One occurrence of a struct field; repeated is True for fields declared repeated."""

    name: str
    value: "TypedValue"
    repeated: bool = False


@dataclass(frozen=True)
class VariantValue:
    """The chosen variant of an enum and its decoded body."""

    name: str
    value: "TypedValue"


@dataclass(frozen=True)
class StructValue:
    """Decoded struct; fields appear in input order, repeated fields once per occurrence."""

    fields: tuple[FieldValue, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))

    def get(self, name: str) -> "TypedValue | None":
        """Value of the first field with this name, or None if absent."""
        for field_value in self.fields:
            if field_value.name == name:
                return field_value.value
        return None

    def get_all(self, name: str) -> list["TypedValue"]:
        """Values of every field with this name, in order."""
        return [fv.value for fv in self.fields if fv.name == name]

    def to_python(self) -> dict[str, Any]:
        """Plain dict; repeated fields (and names seen more than once) map to lists."""
        result: dict[str, Any] = {}
        counts: dict[str, int] = {}
        for fv in self.fields:
            counts[fv.name] = counts.get(fv.name, 0) + 1
        for fv in self.fields:
            if fv.repeated or counts[fv.name] > 1:
                result.setdefault(fv.name, []).append(fv.value.to_python())
            else:
                result[fv.name] = fv.value.to_python()
        return result


@dataclass(frozen=True)
class EnumValue:
    """Decoded enum carrying exactly one variant."""

    variant: VariantValue

    @property
    def name(self) -> str:
        return self.variant.name

    def to_python(self) -> dict[str, Any]:
        return {self.variant.name: self.variant.value.to_python()}


type TypedValue = StringValue | BoolValue | StructValue | EnumValue
