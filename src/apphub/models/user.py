"""Pydantic models for the User entity.

Users are persisted with the rest of the store but no route exposes them.
The password is kept exactly as given; nothing authenticates against it.
"""

from pydantic import Field

from apphub.models.common import ApiModel, RecordModel


class UserCreate(ApiModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)


class User(RecordModel):
    username: str
    password: str
