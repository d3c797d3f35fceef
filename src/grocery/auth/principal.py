"""The authenticated caller, as seen by the API layer."""

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    ADMIN = "admin"
    CUSTOMER = "customer"


@dataclass(frozen=True)
class Principal:
    user_id: str
    email: str
    role: Role | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_customer(self) -> bool:
        # Admins can do anything a customer can
        return self.role in (Role.CUSTOMER, Role.ADMIN)
