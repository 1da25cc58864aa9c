"""Payment endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from mealmate.api.auth import require_authenticated
from mealmate.api.responses import insert_response
from mealmate.api.schemas import PaymentCreate, PaymentIntentCreate

if TYPE_CHECKING:
    from mealmate.containers import AppContainer

router = APIRouter(tags=["payments"])


@router.post("/create-payment-intent")
async def create_payment_intent(
    payload: PaymentIntentCreate, request: Request
) -> dict[str, str]:
    """Create a gateway payment intent and return its client secret."""
    container: AppContainer = request.app.state.container
    client_secret = await container.payment_service.create_payment_intent(
        payload.price
    )
    return {"clientSecret": client_secret}


@router.post("/payments")
def record_payment(payload: PaymentCreate, request: Request) -> dict[str, object]:
    """Store a completed payment."""
    container: AppContainer = request.app.state.container
    return insert_response(
        container.payment_service.record_payment(payload.to_document())
    )


@router.get("/payments", dependencies=[Depends(require_authenticated)])
def list_payments(
    request: Request, email: str | None = None
) -> list[dict[str, object]]:
    """Return payment history, newest first."""
    container: AppContainer = request.app.state.container
    return container.payment_service.list_payments(email)
