"""Tests for bindtree.decoder -- decoding trees against schemas."""

import pytest

from bindtree.decoder import SchemaDecoder, decode, decode_value_text, loads
from bindtree.errors import DecodeError, ParseError
from bindtree.parser import parse_binding, parse_value
from bindtree.schema import BOOL, STRING, Field, Variant, enum, struct
from bindtree.tree import Binding, Value
from bindtree.values import (
    BoolValue,
    EnumValue,
    FieldValue,
    StringValue,
    StructValue,
    VariantValue,
)


def _value(text: str) -> Value:
    value, rest = parse_value(text)
    assert rest == ""
    return value


class TestLeafDecoding:
    """Test String and Bool leaves."""

    def test_string(self):
        assert decode(STRING, Value(token="hello")) == StringValue(text="hello")

    def test_bool_true(self):
        assert decode(BOOL, Value(token="true")) == BoolValue(flag=True)

    def test_bool_false(self):
        assert decode(BOOL, Value(token="false")) == BoolValue(flag=False)

    @pytest.mark.parametrize("token", ["maybe", "True", "FALSE", "1", "yes"])
    def test_bool_rejects_other_tokens(self, token):
        """Unrecognized tokens are errors, never silently false."""
        with pytest.raises(DecodeError, match="Invalid boolean"):
            decode(BOOL, Value(token=token))

    def test_string_rejects_block(self):
        with pytest.raises(DecodeError, match="A string value cannot carry a block"):
            decode(STRING, _value("hello{a=b}"))

    def test_bool_rejects_block(self):
        with pytest.raises(DecodeError, match="A boolean value cannot carry a block"):
            decode(BOOL, _value("true{a=b}"))

    def test_empty_block_on_leaf_is_fine(self):
        """'{}' parses to no children, so a leaf accepts it."""
        assert decode(STRING, _value("hello{}")) == StringValue(text="hello")


class TestEnumDecoding:
    """Test variant dispatch."""

    def test_decode_add_subcommand(self, git_schema):
        result = decode(git_schema, _value("add{verbose=true force=false}"))
        assert result == EnumValue(
            variant=VariantValue(
                name="add",
                value=StructValue(
                    fields=(
                        FieldValue(name="verbose", value=BoolValue(flag=True)),
                        FieldValue(name="force", value=BoolValue(flag=False)),
                    )
                ),
            )
        )

    def test_whitespace_does_not_matter(self, git_schema):
        spaced = decode(git_schema, _value("add { verbose=true  force=false }"))
        compact = decode(git_schema, _value("add{verbose=true force=false}"))
        assert spaced == compact

    def test_variant_without_block(self, git_schema):
        result = decode(git_schema, Value(token="diff"))
        assert result == EnumValue(variant=VariantValue(name="diff", value=StructValue()))

    def test_unknown_variant(self, git_schema):
        with pytest.raises(DecodeError, match="Unknown variant 'zzz'") as exc_info:
            decode(git_schema, _value("zzz{}"))
        assert "add, diff" in str(exc_info.value)
        assert exc_info.value.path == ()

    def test_non_struct_variant_body(self):
        schema = enum(Variant("say", STRING), Variant("quiet", struct()))
        result = decode(schema, _value("say{say=hello}"))
        assert result == EnumValue(variant=VariantValue(name="say", value=StringValue("hello")))

    def test_non_struct_variant_body_requires_named_binding(self):
        schema = enum(Variant("say", STRING))
        with pytest.raises(DecodeError, match="expects a block with a single 'say=...'"):
            decode(schema, _value("say{word=hello}"))
        with pytest.raises(DecodeError, match="expects a block"):
            decode(schema, Value(token="say"))

    def test_nested_enum_variant(self):
        mode = enum(Variant("on", struct()), Variant("off", struct()))
        schema = enum(Variant("set", mode))
        result = decode(schema, _value("set{set=on}"))
        assert result.variant.value == EnumValue(variant=VariantValue(name="on", value=StructValue()))


class TestStructDecoding:
    """Test field matching, arity and ordering."""

    def test_unknown_field_rejected(self, git_schema):
        with pytest.raises(DecodeError, match="Unknown field 'extra'") as exc_info:
            decode(git_schema, _value("add{verbose=true extra=true}"))
        assert exc_info.value.path == ("add", "extra")

    def test_invalid_bool_reports_path(self, git_schema):
        with pytest.raises(DecodeError, match="Invalid boolean 'maybe'") as exc_info:
            decode(git_schema, _value("add{verbose=maybe}"))
        assert exc_info.value.path == ("add", "verbose")
        assert str(exc_info.value).endswith("at add.verbose")

    def test_duplicate_non_repeated_field(self, git_schema):
        with pytest.raises(DecodeError, match="accepts a single value"):
            decode(git_schema, _value("add{force=true force=false}"))

    def test_multi_value_non_repeated_field(self, git_schema):
        with pytest.raises(DecodeError, match="accepts a single value") as exc_info:
            decode(git_schema, _value("add{force=true,false}"))
        assert exc_info.value.path == ("add", "force")

    def test_missing_optional_field_is_absent(self, git_schema):
        result = decode(git_schema, _value("add{force=true}"))
        body = result.variant.value
        assert body.get("verbose") is None
        assert body.get("force") == BoolValue(True)

    def test_missing_required_field(self):
        schema = struct(Field("name", STRING, required=True), Field("email", STRING))
        with pytest.raises(DecodeError, match="Missing required field 'name'"):
            decode(schema, _value("author{email=x}"))

    def test_repeated_field_via_repeated_bindings(self, git_schema):
        result = decode(git_schema, _value("add{pathspec=true verbose=true pathspec=false}"))
        body = result.variant.value
        assert body.get_all("pathspec") == [BoolValue(True), BoolValue(False)]
        # Fields keep input order
        assert [fv.name for fv in body.fields] == ["pathspec", "verbose", "pathspec"]

    def test_repeated_field_via_comma_values(self, git_schema):
        result = decode(git_schema, _value("diff{path=src,docs path=tests}"))
        body = result.variant.value
        assert body.get_all("path") == [StringValue("src"), StringValue("docs"), StringValue("tests")]

    def test_repeated_field_error_path_has_index(self, git_schema):
        with pytest.raises(DecodeError) as exc_info:
            decode(git_schema, _value("add{pathspec=true pathspec=nope}"))
        assert exc_info.value.path == ("add", "pathspec[1]")

    def test_required_repeated_field_needs_one(self):
        schema = struct(Field("path", STRING, repeated=True, required=True))
        with pytest.raises(DecodeError, match="Missing required field 'path'"):
            decode(schema, Value(token="x"))
        assert decode(schema, _value("x{path=a}")).get_all("path") == [StringValue("a")]

    def test_struct_field_token_not_retained(self):
        schema = struct(Field("author", struct(Field("name", STRING))))
        result = decode(schema, _value("commit{author=anything{name=bob}}"))
        assert result == StructValue(
            fields=(
                FieldValue(
                    name="author",
                    value=StructValue(fields=(FieldValue(name="name", value=StringValue("bob")),)),
                ),
            )
        )

    def test_no_partial_result_on_error(self, git_schema):
        """An error deep inside aborts the whole decode."""
        schema = struct(Field("cmd", git_schema, repeated=True))
        with pytest.raises(DecodeError) as exc_info:
            decode(schema, _value("x{cmd=add{verbose=true} cmd=diff{color=blue}}"))
        assert exc_info.value.path == ("cmd[1]", "diff", "color")


class TestNesting:
    """Test deep schemas and depth limits."""

    @pytest.fixture
    def nested_schema(self):
        level3 = enum(Variant("f", struct(Field("g", STRING))))
        level2 = enum(Variant("d", struct(Field("e", level3))))
        return enum(Variant("b", struct(Field("c", level2))))

    def test_three_levels(self, nested_schema):
        result = decode(nested_schema, _value("b{c=d{e=f{g=h}}}"))
        assert result.to_python() == {"b": {"c": {"d": {"e": {"f": {"g": "h"}}}}}}

    def test_depth_limit(self, nested_schema):
        with pytest.raises(DecodeError, match="maximum depth of 2"):
            decode(nested_schema, _value("b{c=d{e=f{g=h}}}"), max_depth=2)

    def test_decoder_instance_reusable(self, nested_schema):
        decoder = SchemaDecoder(max_depth=3)
        first = decoder.decode(nested_schema, _value("b{c=d{e=f{g=h}}}"))
        second = decoder.decode(nested_schema, _value("b{c=d{e=f{g=h}}}"))
        assert first == second


class TestBindingInput:
    """Test decoding a Binding rather than a Value."""

    def test_binding_with_single_value(self, git_schema):
        binding, _ = parse_binding("git=add{verbose=true}")
        result = decode(git_schema, binding)
        assert result.variant.name == "add"

    def test_binding_path_prefix(self, git_schema):
        binding, _ = parse_binding("git=add{verbose=maybe}")
        with pytest.raises(DecodeError) as exc_info:
            decode(git_schema, binding)
        assert exc_info.value.path == ("git", "add", "verbose")

    def test_binding_with_several_values(self, git_schema):
        binding = Binding(name="git", values=(Value(token="add"), Value(token="diff")))
        with pytest.raises(DecodeError, match="Expected exactly one value for 'git', got 2"):
            decode(git_schema, binding)


class TestTextEntryPoints:
    """Test loads and decode_value_text."""

    def test_loads(self, git_schema):
        result = loads(git_schema, "git=diff { color=true path=src }")
        assert result.to_python() == {"diff": {"color": True, "path": ["src"]}}

    def test_loads_parse_error(self, git_schema):
        with pytest.raises(ParseError):
            loads(git_schema, "git=diff{color=true")

    def test_decode_value_text(self, git_schema):
        result = decode_value_text(git_schema, "add{verbose=true force=false}")
        assert result.to_python() == {"add": {"verbose": True, "force": False}}

    def test_decode_value_text_trailing_input(self, git_schema):
        with pytest.raises(ParseError, match="Unexpected trailing input"):
            decode_value_text(git_schema, "add{} diff{}")
