import logging
from typing import List, Optional, Sequence

import httpx

from config import settings
from core.interfaces import DirectionsAdapter
from core.exceptions import DirectionsRequestError
from models.routes import Coordinate, RouteCandidate

logger = logging.getLogger(__name__)

ALTERNATIVE_ROUTES = {
    "target_count": 3,
    "weight_factor": 1.4,
    "share_factor": 0.6,
}


def _candidates_from_ors(data: dict, source: str) -> List[RouteCandidate]:
    out: List[RouteCandidate] = []
    for r in data.get("routes") or []:
        summary = r.get("summary") or {}
        # ORS omits distance/duration entirely for zero-length routes
        out.append(
            RouteCandidate(
                geometry=r.get("geometry") or "",
                distance_km=float(summary.get("distance", 0.0)),
                duration_min=float(summary.get("duration", 0.0)) / 60.0,
                source=source,
            )
        )
    return out


class ORSDirectionsAdapter(DirectionsAdapter):
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        profile: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.ORS_API_KEY
        self.base_url = (base_url or settings.ORS_BASE_URL).rstrip("/")
        self.profile = profile or settings.ORS_PROFILE
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_S

    @property
    def url(self) -> str:
        return f"{self.base_url}/v2/directions/{self.profile}"

    def _payload(self, coordinates: Sequence[Coordinate], alternatives: bool) -> dict:
        payload = {
            "coordinates": [c.as_lnglat() for c in coordinates],
            "preference": "recommended",
            "units": "km",
            "geometry": "true",
            # -1 = unlimited snapping radius (snap to ANY nearest road)
            "radiuses": [-1] * len(coordinates),
        }
        if alternatives:
            payload["alternative_routes"] = dict(ALTERNATIVE_ROUTES)
        return payload

    async def get_routes(
        self,
        coordinates: Sequence[Coordinate],
        alternatives: bool = False,
        source: str = "direct",
    ) -> List[RouteCandidate]:
        """
        Request driving routes through `coordinates` (>= 2, in order).

        A 4xx answer means ORS rejected this particular request (too long,
        unroutable point, ...): it yields no routes rather than an error.
        When alternatives are rejected with 400 the leg is retried once
        without them.
        """
        if len(coordinates) < 2:
            raise DirectionsRequestError("ORS directions need at least 2 coordinates.")

        headers = {
            "Authorization": self.api_key,
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(
                    self.url, headers=headers, json=self._payload(coordinates, alternatives)
                )
                if resp.status_code == 400 and alternatives:
                    logger.warning(
                        "ORS rejected alternatives for leg %s (likely distance limit); retrying without",
                        source,
                    )
                    resp = await client.post(
                        self.url, headers=headers, json=self._payload(coordinates, False)
                    )
        except httpx.HTTPError as e:
            raise DirectionsRequestError(f"ORS transport error: {e}") from e

        if 400 <= resp.status_code < 500:
            logger.warning(
                "ORS returned %s for leg %s: %s", resp.status_code, source, resp.text
            )
            return []
        if resp.status_code >= 500:
            raise DirectionsRequestError(
                f"ORS HTTP error {resp.status_code}: {resp.text}"
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise DirectionsRequestError(f"ORS returned invalid JSON: {e}") from e
        return _candidates_from_ors(data, source)
