# api/geocode_routes.py
from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from adapters.online.nominatim_adapter import NominatimAdapter
from core.exceptions import GeocodingError
from core.interfaces import GeocodingAdapter
from models.geocoding import GeocodeResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/geocode", tags=["geocode"])


@lru_cache(maxsize=1)
def get_geocoder() -> GeocodingAdapter:
    # one instance per process so its cache is shared across requests
    return NominatimAdapter()


@router.get("", response_model=List[GeocodeResult])
async def geocode(
    q: Optional[str] = Query(None),
    geocoder: GeocodingAdapter = Depends(get_geocoder),
):
    if not q:
        raise HTTPException(400, 'Query parameter "q" is required')
    try:
        return await geocoder.search(q)
    except GeocodingError as e:
        logger.error("Geocoding error for %r: %s", q, e)
        raise HTTPException(500, "Failed to fetch location data")
