"""Yelp Fusion business-search client.

Every call is bounded by ``YELP_TIMEOUT_SECONDS`` and any failure (network,
timeout, non-2xx, unparsable body) is raised as ``DependencyFailure``.  No
retries are performed here.
"""
import logging
from typing import Any, Optional

import requests

from seatspot.config import settings
from seatspot.errors import DependencyFailure, NotFound

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = "restaurants,cafes"
DEFAULT_LIMIT = 20


class YelpClient:
    """Thin wrapper over the Yelp Fusion REST API."""

    def __init__(self, api_key: str, base_url: str, timeout: float):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        if not self.api_key:
            raise DependencyFailure("Business search is not configured")

        url = f"{self.base_url}{path}"
        try:
            r = requests.get(
                url,
                params=params,
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
        except requests.Timeout:
            logger.warning("Yelp request to %s timed out after %ss", path, self.timeout)
            raise DependencyFailure("Business search timed out")
        except requests.RequestException as exc:
            logger.warning("Yelp request to %s failed: %s", path, exc)
            raise DependencyFailure("Business search is unavailable")

        try:
            data = r.json()
        except ValueError:
            data = {}

        if not r.ok:
            description = (data.get("error") or {}).get("description") if isinstance(data, dict) else None
            logger.warning("Yelp %s returned %d: %s", path, r.status_code, description)
            if r.status_code == 404:
                raise NotFound(description or "Business not found")
            raise DependencyFailure(description or "Business search request failed")
        return data

    def search(
        self,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        location: Optional[str] = None,
        radius: Optional[int] = None,
        limit: Optional[int] = None,
        term: Optional[str] = None,
        sort_by: Optional[str] = None,
        categories: str = DEFAULT_CATEGORIES,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {
            "term": term or "",
            "categories": categories,
            "limit": limit or DEFAULT_LIMIT,
        }
        if location:
            params["location"] = location
        if latitude is not None and longitude is not None:
            params["latitude"] = latitude
            params["longitude"] = longitude
        if radius is not None:
            params["radius"] = radius
        if sort_by:
            params["sort_by"] = sort_by
        return self._get("/businesses/search", params)

    def business(self, external_id: str) -> dict[str, Any]:
        data = self._get(f"/businesses/{external_id}")
        data.setdefault("photos", [])
        return data


def get_yelp_client() -> YelpClient:
    """FastAPI dependency — overridden in tests."""
    return YelpClient(
        api_key=settings.YELP_API_KEY,
        base_url=settings.YELP_API_URL,
        timeout=settings.YELP_TIMEOUT_SECONDS,
    )
