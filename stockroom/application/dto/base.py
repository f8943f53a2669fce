"""Shared pydantic configuration for wire models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for request/response DTOs.

    Serialized with camelCase keys; snake_case names are accepted on input
    too. Unknown request keys (for example a client-supplied totalAmount)
    are ignored. Infinity and NaN are rejected wherever a float is expected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        allow_inf_nan=False,
    )
