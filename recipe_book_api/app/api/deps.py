"""
FastAPI dependencies shared by the endpoints.

The document store is created by the application (see ``main``) and
kept on ``app.state.store``; handlers obtain it, or a service bound to
it, through these dependencies.  Tests swap the store by passing one
to ``create_app`` or through ``app.dependency_overrides``.
"""

from fastapi import Depends, Request

from ..core.store import RecipeStore
from ..services.recipe_service import RecipeService


def get_store(request: Request) -> RecipeStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Recipe store has not been initialised")
    return store


def get_recipe_service(store: RecipeStore = Depends(get_store)) -> RecipeService:
    return RecipeService(store)
