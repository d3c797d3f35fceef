"""FastAPI endpoints for customers. Every route needs an authenticated caller."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from grocery.auth.dependencies import get_principal
from grocery.auth.principal import Principal
from grocery.errors import CustomerNotFound
from grocery.identity.api.schemas import (
    CustomerIdResponse,
    CustomerResponse,
    RegisterCustomerRequest,
    StatusResponse,
    UpdateCustomerRequest,
)
from grocery.identity.customer.customer import Customer
from grocery.identity.customer.management import DeleteCustomer, RegisterCustomer, UpdateCustomer

router = APIRouter(prefix="/customers", tags=["customers"])


@router.post("", status_code=201, response_model=CustomerIdResponse)
async def register_customer(
    body: RegisterCustomerRequest, principal: Principal = Depends(get_principal)
) -> CustomerIdResponse:
    command = RegisterCustomer(
        name=body.name,
        email=body.email,
        phone=body.phone,
        address=body.address,
        requested_by=principal.user_id,
    )
    result = current_domain.process(command, asynchronous=False)
    return CustomerIdResponse(customer_id=result)


@router.get("", response_model=list[CustomerResponse])
async def list_customers(principal: Principal = Depends(get_principal)) -> list[CustomerResponse]:
    customers = current_domain.repository_for(Customer).list_all()
    return [CustomerResponse.from_customer(customer) for customer in customers]


@router.get("/by-email/{email}", response_model=CustomerResponse)
async def get_customer_by_email(email: str, principal: Principal = Depends(get_principal)) -> CustomerResponse:
    customer = current_domain.repository_for(Customer).find_by_email(email)
    if customer is None:
        raise CustomerNotFound(email)
    return CustomerResponse.from_customer(customer)


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: str, principal: Principal = Depends(get_principal)) -> CustomerResponse:
    customer = current_domain.repository_for(Customer).get_customer(customer_id)
    return CustomerResponse.from_customer(customer)


@router.put("/{customer_id}", response_model=StatusResponse)
async def update_customer(
    customer_id: str, body: UpdateCustomerRequest, principal: Principal = Depends(get_principal)
) -> StatusResponse:
    command = UpdateCustomer(
        customer_id=customer_id,
        name=body.name,
        email=body.email,
        phone=body.phone,
        address=body.address,
        requested_by=principal.user_id,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.delete("/{customer_id}", response_model=StatusResponse)
async def delete_customer(customer_id: str, principal: Principal = Depends(get_principal)) -> StatusResponse:
    current_domain.process(DeleteCustomer(customer_id=customer_id), asynchronous=False)
    return StatusResponse()
