from __future__ import annotations


class AppError(Exception):
    """Base app error."""


class DirectionsRequestError(AppError):
    """Raised when a directions provider fails on a single leg."""


class RouteAcquisitionError(AppError):
    """Raised when no directions leg produced a usable route."""


class GeocodingError(AppError):
    """Raised when the geocoding upstream fails."""
