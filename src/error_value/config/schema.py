"""Configuration schema. Defaults accept identifier-like string reasons and enum members."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ErrorValueConfig(BaseModel):
    """Validation policy applied by the ``domain``/``infra`` constructors."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    strict_reasons: bool = Field(
        True,
        description=(
            "Require string reasons to be valid Python identifiers "
            "(e.g. 'db_down'; 'db down' is rejected). When False any non-empty string is accepted."
        ),
    )
    allow_enum_reasons: bool = Field(
        True,
        description="Accept Enum members as reasons, e.g. a project-wide Reason enum.",
    )


DEFAULT_CONFIG = ErrorValueConfig()
