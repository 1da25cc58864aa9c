"""ASGI entrypoint for the MealMate API."""

from mealmate.api.app import create_app
from mealmate.containers import build_container

app = create_app(build_container())
