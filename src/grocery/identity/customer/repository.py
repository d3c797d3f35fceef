"""Repository for the Customer aggregate."""

from protean.exceptions import ObjectNotFoundError

from grocery.domain import grocery
from grocery.errors import CustomerNotFound
from grocery.identity.customer.customer import Customer, normalize_email

LIST_LIMIT = 1000


@grocery.repository(part_of=Customer)
class CustomerRepository:
    def get_customer(self, customer_id) -> Customer:
        """Load a customer or raise `CustomerNotFound`."""
        try:
            return self.get(customer_id)
        except ObjectNotFoundError as exc:
            raise CustomerNotFound(customer_id) from exc

    def exists(self, customer_id) -> bool:
        if not customer_id:
            return False
        return self._dao.query.filter(id=customer_id).all().total > 0

    def find_by_email(self, email) -> Customer | None:
        results = self._dao.query.filter(email=normalize_email(email)).all()
        return results.first

    def list_all(self) -> list[Customer]:
        return self._dao.query.order_by("name").limit(LIST_LIMIT).all().items

    def delete(self, customer: Customer) -> None:
        self._dao.delete(customer)
