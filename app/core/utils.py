"""
Utility functions for the application.
"""
import math

from datetime import datetime, timezone
from typing import Type, TypeVar, List, Any
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)


def model_to_schema(model: Any, schema_class: Type[T]) -> T:
    """
    Convert a domain model instance (dataclass or any attribute bag) to a Pydantic schema instance.

    Args:
        model: Domain model instance
        schema_class: Pydantic schema class

    Returns:
        Instance of the Pydantic schema
    """
    return schema_class.model_validate(model, from_attributes=True)


def models_to_schemas(models: List[Any], schema_class: Type[T]) -> List[T]:
    """Convert a list of domain model instances to a list of Pydantic schema instances."""
    return [model_to_schema(model, schema_class) for model in models]


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round halves away from zero for non-negative values (2.5 -> 3, 0.25 -> 0.3).

    Python's round() uses banker's rounding, which would turn an average of
    16.5 into 16. Stock figures here are never negative.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
