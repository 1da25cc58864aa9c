"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from pymongo import MongoClient
from supabase import create_client

from mealmate.adapters.mongo_meal_repository import MongoMealRepository
from mealmate.adapters.mongo_meal_request_repository import (
    MongoMealRequestRepository,
)
from mealmate.adapters.mongo_payment_repository import MongoPaymentRepository
from mealmate.adapters.mongo_review_repository import MongoReviewRepository
from mealmate.adapters.mongo_user_repository import MongoUserRepository
from mealmate.adapters.stripe_client import HttpxStripeClient
from mealmate.adapters.supabase_identity_verifier import (
    IdentityVerifier,
    SupabaseIdentityVerifier,
)
from mealmate.config import Settings
from mealmate.services.meal_requests import MealRequestService
from mealmate.services.meals import MealService
from mealmate.services.payments import PaymentService
from mealmate.services.reviews import ReviewService
from mealmate.services.users import UserService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    identity_verifier: IdentityVerifier
    meal_service: MealService
    user_service: UserService
    meal_request_service: MealRequestService
    review_service: ReviewService
    payment_service: PaymentService
    prepare_resources: Callable[[], Awaitable[None]]
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    mongo_client: MongoClient = MongoClient(resolved_settings.mongo_uri)
    database = mongo_client[resolved_settings.mongo_db_name]
    meal_repository = MongoMealRepository(database["meals"])
    user_repository = MongoUserRepository(database["users"])
    meal_request_repository = MongoMealRequestRepository(database["mealRequests"])
    review_repository = MongoReviewRepository(database["reviews"])
    payment_repository = MongoPaymentRepository(database["payments"])
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_key
    )
    stripe_client = HttpxStripeClient.create(
        secret_key=resolved_settings.stripe_secret_key,
        base_url=resolved_settings.stripe_base_url,
    )

    async def prepare_resources() -> None:
        mongo_client.admin.command("ping")
        _logger.info(
            "Connected to MongoDB database %s", resolved_settings.mongo_db_name
        )
        user_repository.ensure_indexes()

    async def close_resources() -> None:
        await stripe_client.close()
        mongo_client.close()

    return AppContainer(
        settings=resolved_settings,
        identity_verifier=SupabaseIdentityVerifier(supabase_client),
        meal_service=MealService(meal_repository),
        user_service=UserService(user_repository),
        meal_request_service=MealRequestService(meal_request_repository),
        review_service=ReviewService(
            repository=review_repository, meal_repository=meal_repository
        ),
        payment_service=PaymentService(
            repository=payment_repository,
            gateway=stripe_client,
            currency=resolved_settings.payment_currency,
        ),
        prepare_resources=prepare_resources,
        close_resources=close_resources,
    )
