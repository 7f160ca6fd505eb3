"""
Document store integration.

Recipes live in an Azure Cosmos DB container partitioned on
``/course``.  Point operations (replace, delete) therefore need both
the item ``id`` and its ``course`` to locate the physical partition.

The store is an explicit object: ``build_store`` constructs it from
``Settings`` and the application keeps it on ``app.state.store`` from
startup to shutdown.  Request handlers receive it through a FastAPI
dependency rather than reaching for a module-level client.

Two implementations are provided:

* :class:`CosmosRecipeStore` – the production store backed by the
  asynchronous Cosmos SDK.
* :class:`InMemoryRecipeStore` – a process-local dictionary keyed by
  ``(course, id)`` for local development and tests.

Both translate backend failures into :class:`RecipeNotFoundError`
(the item does not exist at the given id and partition) or
:class:`StoreError` (anything else).
"""

from __future__ import annotations

import copy
import logging
import uuid
from typing import Any, Dict, List, Optional, Tuple

from azure.core.exceptions import AzureError
from azure.cosmos import PartitionKey, exceptions
from azure.cosmos.aio import CosmosClient

from .config import Settings

logger = logging.getLogger(__name__)

PARTITION_KEY_PATH = "/course"


class StoreError(Exception):
    """A document store operation failed."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause

    @classmethod
    def from_exception(cls, exc: BaseException) -> "StoreError":
        status_code = getattr(exc, "status_code", None)
        message = getattr(exc, "message", None) or str(exc)
        return cls(message, status_code=status_code, cause=exc)

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the error for an HTTP 500 response body."""
        return {
            "error": type(self.cause).__name__ if self.cause is not None else type(self).__name__,
            "message": self.message,
            "status_code": self.status_code,
        }


class RecipeNotFoundError(StoreError):
    """No item exists for the requested id and partition key."""

    def __init__(self, recipe_id: str, course: str) -> None:
        super().__init__(f"Recipe {recipe_id} not found in course {course!r}", status_code=404)
        self.recipe_id = recipe_id
        self.course = course


class RecipeStore:
    """Interface shared by all recipe stores.

    Documents are plain dictionaries.  ``create_recipe`` receives a
    document without ``id`` and returns it with the id the store
    assigned.
    """

    async def open(self) -> None:
        """Acquire resources.  Called once at application startup."""

    async def close(self) -> None:
        """Release resources.  Called once at application shutdown."""

    async def list_recipes(self) -> List[Dict[str, Any]]:
        raise NotImplementedError

    async def create_recipe(self, data: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    async def replace_recipe(self, recipe_id: str, course: str, data: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    async def delete_recipe(self, recipe_id: str, course: str) -> None:
        raise NotImplementedError


class CosmosRecipeStore(RecipeStore):
    """Recipe store backed by an Azure Cosmos DB container."""

    def __init__(
        self,
        *,
        endpoint: str,
        key: str,
        database_id: str = "RecipeBookDB",
        container_id: str = "Recipes",
        create_if_missing: bool = False,
        client: Optional[CosmosClient] = None,
    ) -> None:
        if client is None and (not endpoint or not key):
            raise RuntimeError("Azure Cosmos DB credentials not found. Set COSMOS_ENDPOINT and COSMOS_KEY.")
        self.endpoint = endpoint
        self.database_id = database_id
        self.container_id = container_id
        self.create_if_missing = create_if_missing
        self.client = client or CosmosClient(endpoint, credential=key)
        self.container = None

    async def open(self) -> None:
        if self.create_if_missing:
            database = await self.client.create_database_if_not_exists(id=self.database_id)
            self.container = await database.create_container_if_not_exists(
                id=self.container_id,
                partition_key=PartitionKey(path=PARTITION_KEY_PATH),
            )
        else:
            database = self.client.get_database_client(self.database_id)
            self.container = database.get_container_client(self.container_id)
        logger.info("Connected to Cosmos DB container %s/%s", self.database_id, self.container_id)

    async def close(self) -> None:
        await self.client.close()
        self.container = None

    def _require_container(self):
        if self.container is None:
            raise StoreError("Cosmos DB container is not open")
        return self.container

    async def list_recipes(self) -> List[Dict[str, Any]]:
        container = self._require_container()
        try:
            return [item async for item in container.read_all_items()]
        except AzureError as exc:
            raise StoreError.from_exception(exc) from exc

    async def create_recipe(self, data: Dict[str, Any]) -> Dict[str, Any]:
        container = self._require_container()
        try:
            return await container.create_item(body=data, enable_automatic_id_generation=True)
        except AzureError as exc:
            raise StoreError.from_exception(exc) from exc

    async def replace_recipe(self, recipe_id: str, course: str, data: Dict[str, Any]) -> Dict[str, Any]:
        container = self._require_container()
        # The SDK derives the partition from the body, so the body's
        # course must be the partition the item is addressed in.
        body = dict(data, id=recipe_id, course=course)
        try:
            return await container.replace_item(item=recipe_id, body=body)
        except exceptions.CosmosResourceNotFoundError as exc:
            raise RecipeNotFoundError(recipe_id, course) from exc
        except AzureError as exc:
            raise StoreError.from_exception(exc) from exc

    async def delete_recipe(self, recipe_id: str, course: str) -> None:
        container = self._require_container()
        try:
            await container.delete_item(item=recipe_id, partition_key=course)
        except exceptions.CosmosResourceNotFoundError as exc:
            raise RecipeNotFoundError(recipe_id, course) from exc
        except AzureError as exc:
            raise StoreError.from_exception(exc) from exc


class InMemoryRecipeStore(RecipeStore):
    """Process-local recipe store.

    Items are keyed by ``(course, id)`` so that lookups follow the same
    partition rules as Cosmos DB.  Returned documents are copies.
    """

    def __init__(self) -> None:
        self._items: Dict[Tuple[str, str], Dict[str, Any]] = {}

    async def list_recipes(self) -> List[Dict[str, Any]]:
        return [copy.deepcopy(item) for item in self._items.values()]

    async def create_recipe(self, data: Dict[str, Any]) -> Dict[str, Any]:
        item = dict(data)
        item["id"] = item.get("id") or str(uuid.uuid4())
        key = (item.get("course"), item["id"])
        if key in self._items:
            raise StoreError(f"Entity with the specified id already exists: {item['id']}", status_code=409)
        self._items[key] = item
        return copy.deepcopy(item)

    async def replace_recipe(self, recipe_id: str, course: str, data: Dict[str, Any]) -> Dict[str, Any]:
        key = (course, recipe_id)
        if key not in self._items:
            raise RecipeNotFoundError(recipe_id, course)
        item = dict(data, id=recipe_id, course=course)
        self._items[key] = item
        return copy.deepcopy(item)

    async def delete_recipe(self, recipe_id: str, course: str) -> None:
        try:
            del self._items[(course, recipe_id)]
        except KeyError:
            raise RecipeNotFoundError(recipe_id, course) from None


def build_store(settings: Settings) -> RecipeStore:
    """Construct the store selected by ``settings.store_backend``."""
    backend = settings.store_backend.lower()
    if backend == "memory":
        logger.warning("Using the in-memory recipe store; data is lost on restart")
        return InMemoryRecipeStore()
    if backend == "cosmos":
        return CosmosRecipeStore(
            endpoint=settings.cosmos_endpoint,
            key=settings.cosmos_key,
            database_id=settings.cosmos_database,
            container_id=settings.cosmos_container,
            create_if_missing=settings.cosmos_create_container,
        )
    raise ValueError(f"Unknown store backend: {settings.store_backend}")
