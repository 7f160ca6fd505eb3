"""
Business logic for recipes.

``RecipeService`` wraps a :class:`RecipeStore` and converts between
API schemas and store documents.  Store exceptions
(``RecipeNotFoundError``, ``StoreError``) propagate unchanged; the
API layer maps them onto HTTP status codes.
"""

import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from ..core.store import RecipeStore
from ..schemas.recipe import RecipeCreate, RecipeRead, RecipeUpdate

logger = logging.getLogger(__name__)


class RecipeService:
    """Сервис для управления рецептами поверх хранилища документов."""

    def __init__(self, store: RecipeStore) -> None:
        self.store = store

    async def list_recipes(self) -> List[RecipeRead]:
        """Return every recipe in the container, in store order.

        Documents that cannot be read as a recipe at all (for example
        without an ``id``) are logged and left out of the list.
        """
        documents = await self.store.list_recipes()
        recipes: List[RecipeRead] = []
        for doc in documents:
            try:
                recipes.append(self._to_read(doc))
            except ValidationError as exc:
                logger.warning("Skipping unreadable recipe document %r: %s", doc.get("id"), exc)
        return recipes

    async def create_recipe(self, data: RecipeCreate) -> RecipeRead:
        """Create a recipe and return it with the id the store assigned."""
        created = await self.store.create_recipe(data.model_dump())
        logger.info("Created recipe %s in course %s", created.get("id"), data.course)
        return self._to_read(created)

    async def replace_recipe(self, recipe_id: str, data: RecipeUpdate) -> RecipeRead:
        """Replace the recipe stored at ``(recipe_id, data.course)``.

        The new document is ``{id, **data}``.  Because the partition is
        taken from the submitted course, a changed course addresses a
        different partition and surfaces as ``RecipeNotFoundError``
        instead of writing a record that disagrees with its partition.
        """
        document = {"id": recipe_id, **data.model_dump()}
        replaced = await self.store.replace_recipe(recipe_id, data.course, document)
        logger.info("Replaced recipe %s in course %s", recipe_id, data.course)
        return self._to_read(replaced)

    async def delete_recipe(self, recipe_id: str, course: str) -> None:
        await self.store.delete_recipe(recipe_id, course)
        logger.info("Deleted recipe %s from course %s", recipe_id, course)

    @staticmethod
    def _to_read(document: Dict[str, Any]) -> RecipeRead:
        return RecipeRead.model_validate(document)
