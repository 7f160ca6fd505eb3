"""Recipe Book API client.

A thin wrapper around the recipe REST endpoints using ``requests``.
Every public method returns a tuple ``(result, error)``: on success
``error`` is ``None``; on failure ``result`` is empty and ``error`` is
a dictionary with ``status_code`` and ``message`` keys.  The client
never raises for HTTP or transport failures, so callers decide whether
to log, retry or ignore them.

* :meth:`list_recipes` – ``GET /api/recipes``
* :meth:`create_recipe` – ``POST /api/recipes``
* :meth:`update_recipe` – ``PUT /api/recipes/{id}``
* :meth:`delete_recipe` – ``DELETE /api/recipes/{id}`` with the course in the body

Any object exposing ``request(method=..., url=..., json=..., headers=...,
timeout=...)`` can be passed as ``session``; tests use FastAPI's
``TestClient``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

RECIPES_PATH = "/api/recipes"

ApiError = Dict[str, Any]


class RecipeBookAPI:
    """Client for the recipe endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` for empty responses.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {"Accept": "application/json"}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = ""
            try:
                err_json = response.json()
                if isinstance(err_json, dict):
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                else:
                    message = str(err_json)
            except ValueError:
                message = response.text
            if not message:
                message = f"HTTP error! status: {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if response.content:
            try:
                return response.json(), None
            except ValueError:
                logger.error("API returned a non-JSON body for %s %s", method, url)
                return None, {"status_code": response.status_code, "message": "Invalid JSON in response"}
        return None, None

    # ------------------------------------------------------------------
    # Recipe operations
    # ------------------------------------------------------------------
    def list_recipes(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all recipes.

        Returns:
            A tuple ``(recipes, error)``.  ``recipes`` is empty on failure.
        """
        data, error = self._request("GET", RECIPES_PATH)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], {"status_code": None, "message": "Unexpected response for recipe list"}

    def create_recipe(self, recipe: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a recipe.

        Args:
            recipe: ``name``, ``course``, ``ingredients`` and ``instructions``.
        Returns:
            A tuple ``(created, error)``; ``created`` includes the new ``id``.
        """
        return self._request("POST", RECIPES_PATH, json_body=recipe)

    def update_recipe(
        self, recipe_id: str, recipe: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Replace a recipe.  ``recipe`` must include its current ``course``."""
        return self._request("PUT", f"{RECIPES_PATH}/{recipe_id}", json_body=recipe)

    def delete_recipe(self, recipe_id: str, course: str) -> Tuple[bool, Optional[ApiError]]:
        """Delete a recipe.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"{RECIPES_PATH}/{recipe_id}", json_body={"course": course})
        if error:
            return False, error
        return True, None
