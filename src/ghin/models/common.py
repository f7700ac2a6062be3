"""Shared schema building blocks."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter

# Ghin numbers are plain positive integers; numeric strings are rejected.
GhinNumber = Annotated[StrictInt, Field(gt=0)]

ghin_number_adapter = TypeAdapter(GhinNumber)


class RequestModel(BaseModel):
    """Base for request records; unknown fields are a client-side error."""

    model_config = ConfigDict(extra="forbid")


class ResponseModel(BaseModel):
    """Base for response records; fields the client does not model are ignored."""

    model_config = ConfigDict(extra="ignore")
