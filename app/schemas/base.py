"""
Base schemas with common functionality.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Type, TypeVar, Any

T = TypeVar('T', bound='BaseSchema')

class BaseSchema(BaseModel):
    """Base schema for all API payloads: camelCase on the wire, snake_case in Python"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel
    )

    @classmethod
    def from_model(cls: Type[T], model: Any) -> T:
        """Create a schema instance from a domain model"""
        return cls.model_validate(model)

class FrozenSchema(BaseSchema):
    """Base schema for immutable records (resolutions, herd events)"""

    model_config = ConfigDict(frozen=True)
