"""Delivery ports for customer notifications.

Adapters return a delivery receipt instead of raising:
``{"message_id": str | None, "status": "sent" | "failed", "error": str (on failure)}``.
"""

from abc import ABC, abstractmethod


class SMSPort(ABC):
    @abstractmethod
    def send(self, to: str, body: str) -> dict: ...


class EmailPort(ABC):
    @abstractmethod
    def send(self, to: str, subject: str, body: str) -> dict: ...
