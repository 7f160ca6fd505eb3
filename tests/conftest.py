import os
import sys

import pytest
from fastapi.testclient import TestClient

# Ensure repo root on sys.path for imports like `recipe_book_api...`
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from recipe_book_api.app.core.store import InMemoryRecipeStore  # noqa: E402
from recipe_book_api.app.main import create_app  # noqa: E402
from recipe_book_api.client.api import RecipeBookAPI  # noqa: E402

SOUP = {
    "name": "Soup",
    "course": "starter",
    "ingredients": "water\nsalt",
    "instructions": "boil",
}


@pytest.fixture
def store():
    return InMemoryRecipeStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def api(client):
    return RecipeBookAPI(base_url="http://testserver", session=client)


@pytest.fixture
def soup():
    return dict(SOUP)
