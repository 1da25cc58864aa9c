"""Domain errors raised by services and mapped to HTTP responses by the API."""


class MealMateError(Exception):
    """Base class for expected application failures."""


class BadRequestError(MealMateError):
    """The caller supplied input that cannot be used."""


class InvalidIdentifierError(BadRequestError):
    """A path or payload identifier is not a well-formed document id."""


class InvalidQueryError(BadRequestError):
    """A query parameter is missing or malformed."""


class InvalidRoleError(BadRequestError):
    """A role value is outside the allowed set."""


class NotFoundError(MealMateError):
    """The referenced document does not exist."""


class InvalidCredentialsError(MealMateError):
    """The identity provider rejected a bearer token."""


class PaymentGatewayError(MealMateError):
    """The payment gateway returned an unusable response."""
