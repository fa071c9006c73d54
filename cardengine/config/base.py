"""Base configuration class with strict validation.

Every config model inherits from StrictBaseModel so a misspelled key in a
YAML file fails loudly instead of silently falling back to a default.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """Base model rejecting unknown fields.

    Example:
        class SearchSettings(StrictBaseModel):
            iterations: int
            exploration: float = 0.7

        SearchSettings(iterations=500)  # OK
        SearchSettings(iteratons=500)  # ValidationError: extra field 'iteratons'
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )
