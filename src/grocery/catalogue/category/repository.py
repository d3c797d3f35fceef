"""Repository for the Category aggregate."""

from protean.exceptions import ObjectNotFoundError

from grocery.catalogue.category.category import Category
from grocery.domain import grocery
from grocery.errors import CategoryNotFound

LIST_LIMIT = 1000


@grocery.repository(part_of=Category)
class CategoryRepository:
    def get_category(self, category_id) -> Category:
        """Load a category or raise `CategoryNotFound`."""
        try:
            return self.get(category_id)
        except ObjectNotFoundError as exc:
            raise CategoryNotFound(category_id) from exc

    def exists(self, category_id) -> bool:
        return bool(category_id) and self._dao.query.filter(id=category_id).all().total > 0

    def list_all(self) -> list[Category]:
        return self._dao.query.order_by("path").limit(LIST_LIMIT).all().items

    def list_by_parent(self, parent_category_id) -> list[Category]:
        return (
            self._dao.query.filter(parent_category_id=parent_category_id)
            .order_by("name")
            .limit(LIST_LIMIT)
            .all()
            .items
        )

    def has_children(self, category_id) -> bool:
        return self._dao.query.filter(parent_category_id=category_id).all().total > 0

    def delete(self, category: Category) -> None:
        self._dao.delete(category)
