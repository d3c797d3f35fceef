"""Category management: commands and handlers."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from grocery.catalogue.category.category import Category
from grocery.domain import grocery
from grocery.errors import InvalidCategoryData

logger = structlog.get_logger(__name__)


@grocery.command(part_of="Category")
class CreateCategory:
    name: String(required=True)
    description: String()
    parent_category_id: Identifier()
    requested_by: Identifier()


@grocery.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String()
    description: String()
    requested_by: Identifier()


@grocery.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


@grocery.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)

        parent = None
        if command.parent_category_id:
            parent = repo.get_category(command.parent_category_id)

        category = Category.create(
            name=command.name,
            description=command.description,
            parent=parent,
            created_by=command.requested_by,
        )
        repo.add(category)

        logger.info("category_created", category_id=str(category.id), path=category.path)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get_category(command.category_id)
        old_path = category.path

        category.update_details(
            name=command.name,
            description=command.description,
            updated_by=command.requested_by,
        )
        repo.add(category)

        if category.path != old_path:
            self._repath_descendants(repo, category)

    def _repath_descendants(self, repo, parent):
        for child in repo.list_by_parent(str(parent.id)):
            child.move_under(parent.path)
            repo.add(child)
            self._repath_descendants(repo, child)

    @handle(DeleteCategory)
    def delete_category(self, command):
        from grocery.catalogue.product.product import Product

        repo = current_domain.repository_for(Category)
        category = repo.get_category(command.category_id)

        if repo.has_children(command.category_id):
            raise InvalidCategoryData("Category has subcategories and cannot be deleted")
        if current_domain.repository_for(Product).list_by_category(command.category_id):
            raise InvalidCategoryData("Category has products and cannot be deleted")

        repo.delete(category)
        logger.info("category_deleted", category_id=str(command.category_id))
