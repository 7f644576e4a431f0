"""Common Pydantic models shared across routes."""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys; built with snake_case names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AlgorithmInfo(CamelModel):
    description: str
    time_window: str
    max_results: int


class UserCard(CamelModel):
    id: str
    name: Optional[str] = None
    username: Optional[str] = None
    image: Optional[str] = None


class BeatInfo(CamelModel):
    id: str
    title: Optional[str] = None
    genre: Optional[str] = None
    bpm: Optional[int] = None
