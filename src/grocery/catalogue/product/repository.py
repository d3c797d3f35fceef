"""Repository for the Product aggregate."""

from protean.exceptions import ObjectNotFoundError

from grocery.catalogue.product.product import Product
from grocery.domain import grocery
from grocery.errors import ProductNotFound

LIST_LIMIT = 1000


@grocery.repository(part_of=Product)
class ProductRepository:
    def get_product(self, product_id) -> Product:
        """Load a product or raise `ProductNotFound`."""
        try:
            return self.get(product_id)
        except ObjectNotFoundError as exc:
            raise ProductNotFound(product_id) from exc

    def list_all(self) -> list[Product]:
        return self._dao.query.order_by("name").limit(LIST_LIMIT).all().items

    def list_by_category(self, category_id) -> list[Product]:
        return (
            self._dao.query.filter(category_id=category_id)
            .order_by("name")
            .limit(LIST_LIMIT)
            .all()
            .items
        )

    def delete(self, product: Product) -> None:
        self._dao.delete(product)
