"""Customer registration and maintenance: commands and handlers."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from grocery.domain import grocery
from grocery.errors import CustomerAlreadyExists, InvalidCustomerData
from grocery.identity.customer.customer import Customer

logger = structlog.get_logger(__name__)


@grocery.command(part_of="Customer")
class RegisterCustomer:
    """Create a new customer account."""

    name: String(required=True)
    email: String(required=True)
    phone: String()
    address: String()
    requested_by: Identifier()


@grocery.command(part_of="Customer")
class UpdateCustomer:
    """Change any subset of a customer's contact details."""

    customer_id: Identifier(required=True)
    name: String()
    email: String()
    phone: String()
    address: String()
    requested_by: Identifier()


@grocery.command(part_of="Customer")
class DeleteCustomer:
    customer_id: Identifier(required=True)


@grocery.command_handler(part_of=Customer)
class ManageCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        repo = current_domain.repository_for(Customer)
        if command.email and repo.find_by_email(command.email) is not None:
            raise CustomerAlreadyExists(command.email)

        customer = Customer.register(
            name=command.name,
            email=command.email,
            phone=command.phone,
            address=command.address,
            created_by=command.requested_by,
        )
        repo.add(customer)

        logger.info("customer_registered", customer_id=str(customer.id))
        return str(customer.id)

    @handle(UpdateCustomer)
    def update_customer(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get_customer(command.customer_id)

        if command.email:
            existing = repo.find_by_email(command.email)
            if existing is not None and str(existing.id) != str(customer.id):
                raise CustomerAlreadyExists(command.email)

        changes = {
            field: getattr(command, field)
            for field in ("name", "email", "phone", "address")
            if getattr(command, field) is not None
        }
        customer.update_details(updated_by=command.requested_by, **changes)
        repo.add(customer)

    @handle(DeleteCustomer)
    def delete_customer(self, command):
        from grocery.ordering.order.order import Order

        repo = current_domain.repository_for(Customer)
        customer = repo.get_customer(command.customer_id)

        if current_domain.repository_for(Order).list_by_customer(command.customer_id):
            raise InvalidCustomerData("Customer has orders and cannot be deleted")

        repo.delete(customer)
        logger.info("customer_deleted", customer_id=str(command.customer_id))
