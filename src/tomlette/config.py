"""Parser configuration.

Environment variables:
    TOMLETTE_MAX_DEPTH: maximum nesting depth (positive integer)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_DEPTH = 64
MAX_DEPTH_ENV = "TOMLETTE_MAX_DEPTH"


class ParserConfig(BaseSettings):
    """Limits applied while building the value tree.

    ``max_depth`` bounds both array nesting inside a single value and the
    number of segments in a table header path. Values come from keyword
    arguments first, then ``TOMLETTE_*`` environment variables, then the
    defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="TOMLETTE_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        gt=0,
        description="Maximum nesting depth for arrays and table headers",
    )
