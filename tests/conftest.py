"""Shared fixtures for bindtree tests."""

import pytest

from bindtree.schema import BOOL, STRING, EnumSchema, Field, StructSchema, Variant


@pytest.fixture
def add_schema() -> StructSchema:
    """Flags of a git-like 'add' subcommand."""
    return StructSchema(
        fields=[
            Field(name="verbose", repeated=False, schema=BOOL),
            Field(name="force", repeated=False, schema=BOOL),
            Field(name="chmod", repeated=False, schema=BOOL),
            Field(name="pathspec", repeated=True, schema=BOOL),
        ]
    )


@pytest.fixture
def diff_schema() -> StructSchema:
    """Flags of a git-like 'diff' subcommand."""
    return StructSchema(
        fields=[
            Field(name="minimal", repeated=False, schema=BOOL),
            Field(name="color", repeated=False, schema=BOOL),
            Field(name="path", repeated=True, schema=STRING),
        ]
    )


@pytest.fixture
def git_schema(add_schema, diff_schema) -> EnumSchema:
    """Enum of subcommands, each a struct of flags."""
    return EnumSchema(
        variants=[
            Variant(name="add", schema=add_schema),
            Variant(name="diff", schema=diff_schema),
        ]
    )
