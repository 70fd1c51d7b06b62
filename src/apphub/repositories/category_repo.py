"""Category and Subcategory repositories."""

from apphub.models.category import Category, Subcategory
from apphub.models.enums import EntityKind
from apphub.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    kind = EntityKind.CATEGORY

    def list_active(self) -> list[Category]:
        rows = self.list_by_field("is_active", True)
        return sorted(rows, key=lambda row: row.name)


class SubcategoryRepository(BaseRepository[Subcategory]):
    kind = EntityKind.SUBCATEGORY

    def list_active(self, category_id: int | None = None) -> list[Subcategory]:
        rows = self.list_by_field("is_active", True)
        if category_id is not None:
            rows = [row for row in rows if row.category_id == category_id]
        return sorted(rows, key=lambda row: row.name)
