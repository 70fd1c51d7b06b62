"""Repository for User records."""

from typing import Any

from apphub.errors.exceptions import ValidationError
from apphub.models.enums import EntityKind
from apphub.models.user import User
from apphub.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    kind = EntityKind.USER

    def get_by_username(self, username: str) -> User | None:
        rows = self.list_by_field("username", username)
        return rows[0] if rows else None

    def create(self, data: dict[str, Any]) -> User:
        if self.get_by_username(data["username"]) is not None:
            raise ValidationError(
                "Invalid user data",
                [{"field": "username", "message": "Username already exists", "type": "unique"}],
            )
        return super().create(data)
