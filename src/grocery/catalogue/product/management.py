"""Product management: commands and handlers.

Stock counts are not touched here except through `SetProductStock`, which is
an administrative correction. Order-driven stock movement lives in
`grocery.ordering.stock`.
"""

import structlog
from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from grocery.catalogue.category.category import Category
from grocery.catalogue.product.product import Product
from grocery.domain import grocery
from grocery.errors import InvalidProductData

logger = structlog.get_logger(__name__)


@grocery.command(part_of="Product")
class CreateProduct:
    name: String(required=True)
    description: Text()
    price: Float(required=True)
    stock: Integer(required=True)
    category_id: Identifier(required=True)
    requested_by: Identifier()


@grocery.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String()
    description: Text()
    price: Float()
    category_id: Identifier()
    requested_by: Identifier()


@grocery.command(part_of="Product")
class SetProductStock:
    product_id: Identifier(required=True)
    stock: Integer(required=True)
    requested_by: Identifier()


@grocery.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@grocery.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        current_domain.repository_for(Category).get_category(command.category_id)

        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            stock=command.stock,
            category_id=command.category_id,
            created_by=command.requested_by,
        )
        current_domain.repository_for(Product).add(product)

        logger.info("product_created", product_id=str(product.id), stock=product.stock)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        if command.category_id:
            current_domain.repository_for(Category).get_category(command.category_id)

        repo = current_domain.repository_for(Product)
        product = repo.get_product(command.product_id)
        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            category_id=command.category_id,
            updated_by=command.requested_by,
        )
        repo.add(product)

    @handle(SetProductStock)
    def set_product_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get_product(command.product_id)
        previous = product.stock

        product.set_stock(command.stock, updated_by=command.requested_by)
        repo.add(product)

        logger.info(
            "product_stock_set",
            product_id=str(product.id),
            previous_stock=previous,
            new_stock=product.stock,
        )

    @handle(DeleteProduct)
    def delete_product(self, command):
        from grocery.ordering.order.order import Order

        repo = current_domain.repository_for(Product)
        product = repo.get_product(command.product_id)

        if current_domain.repository_for(Order).has_pending_order_with_product(command.product_id):
            raise InvalidProductData("Product is on pending orders and cannot be deleted")

        repo.delete(product)

        logger.info("product_deleted", product_id=str(command.product_id))
