"""Domain events for the Category aggregate."""

from protean.fields import Identifier, Integer, String

from grocery.domain import grocery


@grocery.event(part_of="Category")
class CategoryCreated:
    """A new category was added to the tree."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    parent_category_id: Identifier()
    level: Integer(required=True)
    path: String(required=True)


@grocery.event(part_of="Category")
class CategoryUpdated:
    """A category's name or description changed."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    description: String()
    path: String(required=True)
