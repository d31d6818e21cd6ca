"""Shared base for calculator results."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ResultModel(BaseModel):
    """Immutable result; serialises to camelCase for the JSON API."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
