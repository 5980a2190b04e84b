"""Shared pydantic configuration for request and response bodies.

Wire format is camelCase with the identifier exposed as ``_id``.
"""

from pydantic import AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """Body accepted from clients. Accepts camelCase or snake_case keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ResponseModel(BaseModel):
    """Body returned to clients. Built from ORM objects, serialized as camelCase."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )


class MessageResponse(BaseModel):
    message: str
