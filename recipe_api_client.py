"""Recipe API client.

This module defines a small client wrapper around the Recipe API's
REST endpoints.  It uses the ``requests`` library internally to make
HTTP calls and never raises for HTTP or network failures; instead
every method returns a ``(data, error)`` tuple:

* :meth:`list_recipes` – return all stored recipes.
* :meth:`get_recipe` – fetch a single recipe by its identifier.
* :meth:`create_recipe` – store a new recipe.
* :meth:`delete_recipe` – remove a recipe.
* :meth:`health` – query the liveness probe.

On failure ``data`` is ``None`` (or an empty list) and ``error`` is a
dictionary with keys ``status_code`` and ``message``.  The message is
taken from the ``error`` key of the server's JSON response, e.g.
``"Recipe not found"``.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header, for deployments that put the
service behind an authenticating proxy.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class RecipeAPI:
    """Client for interacting with the Recipe API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            prefix: Path prefix of the API, ``/api`` or ``/api/v1``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + "/" + prefix.strip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/recipes``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = self._error_message(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _error_message(exc: requests.HTTPError) -> str:
        message = ""
        if exc.response is not None:
            try:
                err_json = exc.response.json()
            except ValueError:
                message = exc.response.text
            else:
                if isinstance(err_json, dict):
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                else:
                    message = str(err_json)
        return message or str(exc)

    # ------------------------------------------------------------------
    # Recipe operations
    # ------------------------------------------------------------------
    def list_recipes(
        self, *, limit: Optional[int] = None, offset: int = 0
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve stored recipes in creation order.

        Returns:
            A tuple ``(recipes, error)``. ``recipes`` is empty on failure.
        """
        params: Dict[str, Any] = {}
        if limit is not None:
            params["limit"] = limit
        if offset:
            params["offset"] = offset
        data, error = self._request("GET", "/recipes", params=params or None)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_recipe(self, recipe_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single recipe by ID."""
        return self._request("GET", f"/recipes/{recipe_id}")

    def create_recipe(
        self,
        *,
        name: str,
        ingredients: str,
        instructions: str,
        cook_time: str,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a recipe and return the stored record, including its ``id``."""
        payload = {
            "name": name,
            "ingredients": ingredients,
            "instructions": instructions,
            "cookTime": cook_time,
        }
        return self._request("POST", "/recipes", json_body=payload)

    def delete_recipe(self, recipe_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a recipe.

        Returns:
            A tuple ``(success, error)``.
        """
        data, error = self._request("DELETE", f"/recipes/{recipe_id}")
        if error:
            return False, error
        return data is not None, None

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------
    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Query the service's liveness probe."""
        return self._request("GET", "/health")
