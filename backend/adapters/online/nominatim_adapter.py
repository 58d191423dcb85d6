import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

import httpx

from config import settings
from core.cache import BoundedCache
from core.exceptions import GeocodingError
from core.interfaces import GeocodingAdapter
from models.geocoding import GeocodeResult

logger = logging.getLogger(__name__)

# The stock "Al Anbar" point sits in open desert and can't be routed to;
# pin it to Ramadi, which is on the road network.
_RAMADI = [GeocodeResult(lat=33.4318, lng=43.2987, display_name="Al Anbar (Ramadi), Iraq")]

DEFAULT_OVERRIDES: Dict[str, List[GeocodeResult]] = {
    "الانبار": _RAMADI,
    "al anbar": _RAMADI,
    "anbar": _RAMADI,
}


def load_overrides(path: Optional[str] = None) -> Dict[str, List[GeocodeResult]]:
    """
    Default table, extended by an optional JSON file shaped as
      {"needle": [{"lat": .., "lng": .., "displayName": ..}, ...], ...}
    """
    table = dict(DEFAULT_OVERRIDES)
    path = path if path is not None else settings.GEOCODE_OVERRIDES_FILE
    if not path:
        return table
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    for needle, items in raw.items():
        table[needle.lower()] = [GeocodeResult.model_validate(it) for it in items]
    return table


class NominatimAdapter(GeocodingAdapter):
    def __init__(
        self,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        limit: Optional[int] = None,
        overrides: Optional[Dict[str, List[GeocodeResult]]] = None,
        cache: Optional[BoundedCache] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.NOMINATIM_URL).rstrip("/")
        self.user_agent = user_agent or settings.NOMINATIM_USER_AGENT
        self.limit = limit or settings.GEOCODE_LIMIT
        self.overrides = overrides if overrides is not None else load_overrides()
        self.cache = cache if cache is not None else BoundedCache(settings.GEOCODE_CACHE_SIZE)
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_S

    def match_override(self, query: str) -> Optional[List[GeocodeResult]]:
        q = query.lower()
        for needle, results in self.overrides.items():
            if needle in q:
                return list(results)
        return None

    async def search(self, query: str) -> List[GeocodeResult]:
        """Return candidate locations for `query`; an empty list means no result."""
        overridden = self.match_override(query)
        if overridden is not None:
            return overridden
        # misses are not cached; the next lookup asks upstream again
        return await self.cache.aget_or_set(
            query, lambda: self._fetch(query), store_if=bool
        )

    async def _fetch(self, query: str) -> List[GeocodeResult]:
        params = {"format": "json", "q": query, "limit": str(self.limit)}
        # Nominatim ToS requires an identifying User-Agent
        headers = {"User-Agent": self.user_agent}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(f"{self.base_url}/search", params=params, headers=headers)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPError as e:
            raise GeocodingError(f"Nominatim error: {e}") from e

        return [
            GeocodeResult(
                lat=float(item["lat"]),
                lng=float(item["lon"]),
                display_name=item.get("display_name", ""),
            )
            for item in data
        ]
