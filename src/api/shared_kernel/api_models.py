"""Base Pydantic model for HTTP request and response bodies.

The public API speaks camelCase JSON (``sessionId``, ``createdAt``) while
Python code uses snake_case attributes. Models inheriting from
``ApiModel`` accept either spelling on input and serialize with camelCase
aliases, which FastAPI applies by default to response models.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model with camelCase aliases for the wire format."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
