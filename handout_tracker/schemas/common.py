# handout_tracker/schemas/common.py
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in python. Either is accepted on input."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class DataResp(BaseModel, Generic[T]):
    data: Optional[T] = None
    message: str


class MessageResp(BaseModel):
    message: str
