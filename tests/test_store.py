import asyncio

import pytest
from azure.core.exceptions import ServiceRequestError
from azure.cosmos import exceptions

from recipe_book_api.app.core.config import Settings
from recipe_book_api.app.core.store import (
    CosmosRecipeStore,
    InMemoryRecipeStore,
    RecipeNotFoundError,
    StoreError,
    build_store,
)


def test_in_memory_store_assigns_ids(soup):
    store = InMemoryRecipeStore()
    first = asyncio.run(store.create_recipe(soup))
    second = asyncio.run(store.create_recipe(soup))
    assert first["id"] and second["id"]
    assert first["id"] != second["id"]
    assert len(asyncio.run(store.list_recipes())) == 2


def test_in_memory_store_is_partitioned_by_course(soup):
    store = InMemoryRecipeStore()
    created = asyncio.run(store.create_recipe(soup))

    with pytest.raises(RecipeNotFoundError):
        asyncio.run(store.replace_recipe(created["id"], "main", dict(soup, course="main")))
    with pytest.raises(RecipeNotFoundError):
        asyncio.run(store.delete_recipe(created["id"], "main"))

    asyncio.run(store.delete_recipe(created["id"], "starter"))
    assert asyncio.run(store.list_recipes()) == []


def test_in_memory_store_returns_copies(soup):
    store = InMemoryRecipeStore()
    created = asyncio.run(store.create_recipe(soup))
    created["name"] = "Changed"
    assert asyncio.run(store.list_recipes())[0]["name"] == "Soup"


def test_in_memory_store_rejects_duplicate_ids(soup):
    store = InMemoryRecipeStore()
    asyncio.run(store.create_recipe(dict(soup, id="x")))
    with pytest.raises(StoreError) as excinfo:
        asyncio.run(store.create_recipe(dict(soup, id="x")))
    assert excinfo.value.status_code == 409


class FakeContainer:
    def __init__(self):
        self.items = {}
        self.fail_with = None

    async def _iterate(self):
        for item in list(self.items.values()):
            yield dict(item, _etag='"1"')

    def read_all_items(self):
        if self.fail_with:
            raise self.fail_with
        return self._iterate()

    async def create_item(self, body, enable_automatic_id_generation=False):
        if self.fail_with:
            raise self.fail_with
        item = dict(body)
        if enable_automatic_id_generation and "id" not in item:
            item["id"] = f"id-{len(self.items) + 1}"
        self.items[(item["course"], item["id"])] = item
        return dict(item)

    async def replace_item(self, item, body):
        key = (body["course"], item)
        if key not in self.items:
            raise exceptions.CosmosResourceNotFoundError(status_code=404, message="Entity with the specified id does not exist in the system.")
        self.items[key] = dict(body)
        return dict(body)

    async def delete_item(self, item, partition_key):
        if (partition_key, item) not in self.items:
            raise exceptions.CosmosResourceNotFoundError(status_code=404, message="Entity with the specified id does not exist in the system.")
        del self.items[(partition_key, item)]


class FakeDatabase:
    def __init__(self, container):
        self.container = container
        self.created_container = None

    def get_container_client(self, container_id):
        return self.container

    async def create_container_if_not_exists(self, id, partition_key):
        self.created_container = (id, partition_key)
        return self.container


class FakeClient:
    def __init__(self):
        self.container = FakeContainer()
        self.database = FakeDatabase(self.container)
        self.closed = False
        self.created_database = None

    def get_database_client(self, database_id):
        return self.database

    async def create_database_if_not_exists(self, id):
        self.created_database = id
        return self.database

    async def close(self):
        self.closed = True


def _open_store(**kwargs):
    client = FakeClient()
    store = CosmosRecipeStore(endpoint="", key="", client=client, **kwargs)
    asyncio.run(store.open())
    return store, client


def test_cosmos_store_crud(soup):
    store, client = _open_store()

    created = asyncio.run(store.create_recipe(soup))
    assert created["id"] == "id-1"

    listed = asyncio.run(store.list_recipes())
    assert listed[0]["name"] == "Soup"

    replaced = asyncio.run(store.replace_recipe("id-1", "starter", dict(soup, name="Broth")))
    assert replaced["name"] == "Broth"
    assert replaced["id"] == "id-1"

    asyncio.run(store.delete_recipe("id-1", "starter"))
    assert client.container.items == {}

    asyncio.run(store.close())
    assert client.closed


def test_cosmos_store_maps_not_found(soup):
    store, _ = _open_store()
    with pytest.raises(RecipeNotFoundError):
        asyncio.run(store.replace_recipe("missing", "starter", soup))
    with pytest.raises(RecipeNotFoundError):
        asyncio.run(store.delete_recipe("missing", "starter"))


def test_cosmos_store_wraps_other_errors(soup):
    store, client = _open_store()

    client.container.fail_with = exceptions.CosmosHttpResponseError(status_code=429, message="Request rate is large")
    with pytest.raises(StoreError) as excinfo:
        asyncio.run(store.create_recipe(soup))
    assert excinfo.value.status_code == 429
    assert excinfo.value.to_dict()["error"] == "CosmosHttpResponseError"

    client.container.fail_with = ServiceRequestError("connection refused")
    with pytest.raises(StoreError) as excinfo:
        asyncio.run(store.list_recipes())
    assert excinfo.value.status_code is None
    assert not isinstance(excinfo.value, RecipeNotFoundError)


def test_cosmos_store_can_create_container():
    store, client = _open_store(create_if_missing=True, database_id="RecipeBookDB", container_id="Recipes")
    assert client.created_database == "RecipeBookDB"
    container_id, partition_key = client.database.created_container
    assert container_id == "Recipes"
    assert partition_key["paths"] == ["/course"]


def test_cosmos_store_requires_open():
    store = CosmosRecipeStore(endpoint="", key="", client=FakeClient())
    with pytest.raises(StoreError):
        asyncio.run(store.list_recipes())


def test_build_store():
    assert isinstance(build_store(Settings(store_backend="memory")), InMemoryRecipeStore)

    with pytest.raises(RuntimeError):
        build_store(Settings(store_backend="cosmos", cosmos_endpoint="", cosmos_key=""))

    with pytest.raises(ValueError):
        build_store(Settings(store_backend="sqlite"))
