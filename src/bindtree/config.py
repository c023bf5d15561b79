"""Configuration for bindtree.

Settings are read from environment variables with the BINDTREE_ prefix, e.g.
BINDTREE_MAX_DEPTH=64 or BINDTREE_LOG_LEVEL=DEBUG.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_DEPTH = 128
# Upper bound for max_depth; each block level costs up to four stack frames,
# which must fit under the default recursion limit of 1000.
MAX_DEPTH_LIMIT = 200


class BindtreeConfig(BaseSettings):
    """Limits and logging settings shared by the parser, decoder and CLI."""

    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        le=MAX_DEPTH_LIMIT,
        description="Deepest block nesting accepted by the parser and decoder",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level of the stderr log sink installed by the CLI",
    )

    model_config = SettingsConfigDict(
        env_prefix="BINDTREE_",
        extra="ignore",
    )


@lru_cache
def get_config() -> BindtreeConfig:
    """Return the process-wide configuration, loaded once from the environment."""
    return BindtreeConfig()


def resolve_max_depth(max_depth: int | None) -> int:
    """Use an explicit limit if given, else the configured one."""
    if max_depth is None:
        return get_config().max_depth
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")
    if max_depth > MAX_DEPTH_LIMIT:
        raise ValueError(f"max_depth must be at most {MAX_DEPTH_LIMIT}, got {max_depth}")
    return max_depth
