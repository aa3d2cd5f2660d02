"""
Shared base model for all schemas.

``CamelModel`` serialises snake_case attributes under camelCase JSON
names (``is_favorite`` becomes ``isFavorite``) and accepts either form
on input.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class SuccessResponse(BaseModel):
    """Acknowledgement returned by mutating endpoints without a body."""

    success: bool = True
