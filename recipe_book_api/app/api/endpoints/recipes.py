"""
Recipe endpoints.

Four routes over the ``recipes`` collection.  Each one performs a
single document store operation:

* ``GET /``         – list every recipe.
* ``POST /``        – create a recipe; the store assigns the id.
* ``PUT /{id}``     – replace the recipe at ``(id, course)``.
* ``DELETE /{id}``  – delete the recipe at ``(id, course)``; the
  course is read from the request body.

``RecipeNotFoundError`` becomes HTTP 404 here.  Any other
``StoreError`` is turned into HTTP 500 by the handler registered in
``main``.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from recipe_book_api.app.api.deps import get_recipe_service
from recipe_book_api.app.core.store import RecipeNotFoundError
from recipe_book_api.app.schemas.recipe import RecipeCreate, RecipeDelete, RecipeRead, RecipeUpdate
from recipe_book_api.app.services.recipe_service import RecipeService

router = APIRouter()

NOT_FOUND_DETAIL = "Recipe not found."
COURSE_REQUIRED_DETAIL = "Course (partition key) is required in the request body for deletion."


@router.get("", response_model=List[RecipeRead])
async def list_recipes(
    service: RecipeService = Depends(get_recipe_service),
) -> List[RecipeRead]:
    """Return all recipes."""
    return await service.list_recipes()


@router.post("", response_model=RecipeRead, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    recipe_in: RecipeCreate,
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeRead:
    """Create a new recipe and return it with its assigned id."""
    return await service.create_recipe(recipe_in)


@router.put("/{recipe_id}", response_model=RecipeRead)
async def replace_recipe(
    recipe_id: str,
    recipe_in: RecipeUpdate,
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeRead:
    """Replace an existing recipe.

    The body must carry every field, including the unchanged
    ``course``; it is used to locate the recipe's partition.
    Returns HTTP 404 if no recipe exists at that id and course.
    """
    try:
        return await service.replace_recipe(recipe_id, recipe_in)
    except RecipeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL) from e


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(
    recipe_id: str,
    payload: Optional[RecipeDelete] = Body(None),
    service: RecipeService = Depends(get_recipe_service),
) -> None:
    """Delete a recipe.

    The partition key has to be sent as ``{"course": ...}`` in the
    request body; without it the request is rejected with HTTP 400
    before the store is touched.
    """
    if payload is None or not payload.course:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=COURSE_REQUIRED_DETAIL)
    try:
        await service.delete_recipe(recipe_id, payload.course)
    except RecipeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL) from e
    return None
