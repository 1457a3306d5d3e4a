"""Tag schemas."""

from pydantic import BaseModel


class TagResponse(BaseModel):
    name: str
    count: int


class TagDeleteResponse(BaseModel):
    name: str
    updated: int  # photo sets the tag was removed from
