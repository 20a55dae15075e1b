from enum import Enum
from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel


class CamelCaseBaseModel(BaseModel):
    """
    Base model with camelCase field aliases and automatic serialization.

    This model automatically maps between camelCase (used in client requests,
    responses and the stored JSON document) and snake_case (used internally in
    Python):

    - Input: camelCase keys from the client are converted to snake_case for validation.
    - Internal: snake_case fields are used throughout the Python codebase.
    - Output: call `model_dump(by_alias=True)` to serialize fields back to camelCase.
    - Strings are stripped of surrounding whitespace before validation.
    - Auto-serialization: Enums are dumped as their values.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    @field_serializer("*")
    def serialize_any(self, value):
        """Global serializer: enum members become their plain values"""
        if isinstance(value, Enum):
            return value.value
        return value
