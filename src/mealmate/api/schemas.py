"""Pydantic models for request payloads."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mealmate.domain.timestamps import normalize_timestamp


class _Payload(BaseModel):
    """Base payload: camelCase on the wire, unknown fields kept."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_document(self) -> dict[str, object]:
        """Return the payload as a store document; the store assigns ``_id``."""
        document = self.model_dump(by_alias=True, exclude_none=True)
        document.pop("_id", None)
        return document


class MealCreate(_Payload):
    """Meal posted by a distributor."""

    title: str = Field(min_length=1)
    category: str = Field(min_length=1)
    price: float = Field(ge=0)
    distributor_email: str = Field(alias="distributorEmail", min_length=1)
    post_time: str = Field(alias="postTime")

    @field_validator("post_time")
    @classmethod
    def _normalize_post_time(cls, value: str) -> str:
        return normalize_timestamp(value)


class UserCreate(_Payload):
    """User registration payload."""

    email: str = Field(min_length=1)
    name: str | None = None


class RoleUpdate(BaseModel):
    """Role change payload."""

    role: str


class MealRequestCreate(_Payload):
    """Request for a meal."""

    meal_id: str | None = Field(default=None, alias="mealId")
    requested_by: str | None = Field(default=None, alias="requestedBy")
    user_email: str = Field(alias="userEmail", min_length=1)
    user_name: str | None = Field(default=None, alias="userName")


class ReviewCreate(_Payload):
    """Review of a meal."""

    meal_id: str = Field(alias="mealId")
    reviewer_email: str = Field(alias="reviewerEmail", min_length=1)


class PaymentIntentCreate(BaseModel):
    """Price to charge, in major currency units."""

    price: float = Field(gt=0)


class PaymentCreate(_Payload):
    """Completed payment reported by the client."""

    email: str = Field(min_length=1)
    price: float = Field(ge=0)
