"""Category aggregate for the hierarchical product catalogue."""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, Integer, String

from grocery.domain import grocery
from grocery.errors import InvalidCategoryData

MAX_CATEGORY_LEVEL = 4
PATH_SEPARATOR = "/"


def _validate_details(name, description):
    if not name or not name.strip():
        raise InvalidCategoryData("Category name is required")
    if len(name) > 100:
        raise InvalidCategoryData("Category name cannot exceed 100 characters")
    if PATH_SEPARATOR in name:
        raise InvalidCategoryData(f"Category name cannot contain '{PATH_SEPARATOR}'")
    if description and len(description) > 500:
        raise InvalidCategoryData("Category description cannot exceed 500 characters")


@grocery.aggregate
class Category:
    """A node in the category tree.

    Roots sit at level 0 and every child is one level below its parent, down to
    level 4. ``path`` spells out the chain of ancestor names ending with the
    category's own name, e.g. ``Produce/Fruit/Citrus``.
    """

    name: String(required=True, max_length=100)
    description: String(max_length=500)
    parent_category_id: Identifier()
    level: Integer(default=0, min_value=0, max_value=MAX_CATEGORY_LEVEL)
    path: String(required=True, max_length=1024)
    created_at: DateTime()
    updated_at: DateTime()
    created_by: Identifier()
    updated_by: Identifier()

    @classmethod
    def create(cls, name, description=None, parent=None, created_by=None):
        from grocery.catalogue.category.events import CategoryCreated

        _validate_details(name, description)

        level = parent.level + 1 if parent else 0
        if level > MAX_CATEGORY_LEVEL:
            raise InvalidCategoryData(
                f"Category hierarchy cannot be deeper than {MAX_CATEGORY_LEVEL + 1} levels"
            )

        now = datetime.now(UTC)
        category = cls(
            name=name,
            description=description,
            parent_category_id=parent.id if parent else None,
            level=level,
            path=cls.build_path(parent.path if parent else None, name),
            created_at=now,
            updated_at=now,
            created_by=created_by,
            updated_by=created_by,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                parent_category_id=category.parent_category_id,
                level=level,
                path=category.path,
            )
        )
        return category

    @staticmethod
    def build_path(parent_path, name):
        return f"{parent_path}{PATH_SEPARATOR}{name}" if parent_path else name

    @property
    def parent_path(self):
        if PATH_SEPARATOR not in self.path:
            return None
        return self.path.rsplit(PATH_SEPARATOR, 1)[0]

    def update_details(self, name=None, description=None, updated_by=None):
        from grocery.catalogue.category.events import CategoryUpdated

        new_name = name if name is not None else self.name
        new_description = description if description is not None else self.description
        _validate_details(new_name, new_description)

        self.name = new_name
        self.description = new_description
        self.path = self.build_path(self.parent_path, new_name)
        self.updated_at = datetime.now(UTC)
        self.updated_by = updated_by

        self.raise_(
            CategoryUpdated(
                category_id=self.id,
                name=self.name,
                description=self.description,
                path=self.path,
            )
        )

    def move_under(self, parent_path):
        """Re-root the path after an ancestor was renamed."""
        self.path = self.build_path(parent_path, self.name)
        self.updated_at = datetime.now(UTC)
