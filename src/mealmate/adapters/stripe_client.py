"""Stripe payment gateway client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class PaymentGateway(Protocol):
    """Interface for payment gateway interactions."""

    async def create_payment_intent(
        self, amount: int, currency: str
    ) -> dict[str, object]:
        """Create a payment intent and return raw API data."""


@dataclass
class HttpxStripeClient(PaymentGateway):
    """HTTPX-backed Stripe client."""

    secret_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, secret_key: str, base_url: str) -> "HttpxStripeClient":
        """Create a Stripe client with a managed httpx session."""
        return cls(
            secret_key=secret_key, base_url=base_url, http_client=httpx.AsyncClient()
        )

    async def create_payment_intent(
        self, amount: int, currency: str
    ) -> dict[str, object]:
        """Create a card payment intent for an amount in minor units."""
        url = f"{self.base_url}/payment_intents"
        response = await self.http_client.post(
            url,
            auth=(self.secret_key, ""),
            data={
                "amount": str(amount),
                "currency": currency,
                "payment_method_types[]": "card",
            },
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
