"""Payment intents and payment history."""

import logging
from dataclasses import dataclass
from typing import Protocol

from mealmate.adapters.stripe_client import PaymentGateway
from mealmate.domain.errors import PaymentGatewayError
from mealmate.domain.results import InsertResult
from mealmate.domain.timestamps import utc_now_iso

_logger = logging.getLogger(__name__)


class PaymentRepository(Protocol):
    """Persistence interface for payments."""

    def insert_payment(self, document: dict[str, object]) -> InsertResult:
        """Insert a payment record."""

    def list_payments(self, email: str | None) -> list[dict[str, object]]:
        """Return payments, newest first, optionally for one email."""


@dataclass
class PaymentService:
    """Application service for payments."""

    repository: PaymentRepository
    gateway: PaymentGateway
    currency: str = "usd"

    async def create_payment_intent(self, price: float) -> str:
        """Create a gateway intent for the price and return its client secret."""
        amount = to_minor_units(price)
        intent = await self.gateway.create_payment_intent(amount, self.currency)
        client_secret = intent.get("client_secret")
        if not isinstance(client_secret, str) or not client_secret:
            raise PaymentGatewayError("Payment intent response missing client secret")
        _logger.info("Payment intent created: amount=%s %s", amount, self.currency)
        return client_secret

    def record_payment(self, document: dict[str, object]) -> InsertResult:
        """Store a completed payment stamped with the server time."""
        return self.repository.insert_payment({**document, "date": utc_now_iso()})

    def list_payments(self, email: str | None = None) -> list[dict[str, object]]:
        """Return payment history."""
        return self.repository.list_payments(email or None)


def to_minor_units(price: float) -> int:
    """Convert a price in major units to integer minor units."""
    return int(round(price * 100))
