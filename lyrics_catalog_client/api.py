import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class CatalogClientError(Exception):
    """Raised for any failed call to the catalog API.

    ``status_code`` is ``None`` when the server could not be reached at all.
    """

    def __init__(self, status_code: Optional[int], message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}" if status_code else message)


class CatalogClient:
    """Thin wrapper around the song endpoints of the catalog API"""

    def __init__(self, base_url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise CatalogClientError(None, f"Could not reach the catalog API: {e}") from e

        if not response.ok:
            try:
                message = response.json().get("error") or response.reason
            except (ValueError, AttributeError):
                message = response.text or response.reason
            logger.warning(f"{method} {url} returned {response.status_code}: {message}")
            raise CatalogClientError(response.status_code, message)
        return response.json()

    def list_songs(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/songs")

    def get_song(self, song_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/songs/{song_id}")

    def create_song(self, title: str, artist: str, lyrics: Optional[str] = None) -> Dict[str, Any]:
        return self._request("POST", "/songs", json={"title": title, "artist": artist, "lyrics": lyrics})

    def update_song(self, song_id: int, title: str, artist: str, lyrics: Optional[str] = None) -> Dict[str, Any]:
        return self._request(
            "PUT",
            f"/songs/{song_id}",
            json={"title": title, "artist": artist, "lyrics": lyrics},
        )

    def delete_song(self, song_id: int) -> str:
        return self._request("DELETE", f"/songs/{song_id}")["message"]
