"""Movies API client.

A thin wrapper around ``requests`` for talking to a running Movies API.
Every method returns a tuple ``(data, error)``: on success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list for list
operations) and ``error`` is a dictionary with ``status_code`` and
``message`` keys.

The service reports a missing movie with HTTP 200 and a
``{"message": "Movie not found"}`` body.  The client turns that payload
into an error with ``status_code`` 200 so callers can tell a miss from
a record.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Movie not found"

Error = Dict[str, Any]


class MoviesClient:
    """Client for the ``/movies`` resource."""

    def __init__(self, *, base_url: str, session: Optional[requests.Session] = None, timeout: float = 15) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Tuple[Optional[Any], Optional[Error]]:
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _single(data: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        if isinstance(data, dict) and data.get("message") == NOT_FOUND_MESSAGE and "id" not in data:
            return None, {"status_code": 200, "message": NOT_FOUND_MESSAGE}
        return data, None

    # ------------------------------------------------------------------
    # Movie operations
    # ------------------------------------------------------------------
    def list_movies(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/movies")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_movie(self, movie_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/movies/{movie_id}")
        if error:
            return None, error
        return self._single(data)

    def create_movie(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a movie.  The server assigns the id."""
        return self._request("POST", "/movies", json_body=payload)

    def update_movie(self, movie_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("PUT", f"/movies/{movie_id}", json_body=payload)
        if error:
            return None, error
        return self._single(data)

    def delete_movie(self, movie_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Delete a movie.  Returns the remaining movies."""
        data, error = self._request("DELETE", f"/movies/{movie_id}")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None
