# backend/finder/core/errors.py


class StoreNotReadyError(RuntimeError):
    """Raised when a request arrives before the store handle is connected."""


class FoodDetectionError(RuntimeError):
    """The image classifier was unreachable or answered with something unusable."""


class InvalidQueryError(ValueError):
    pass


class GeocodingError(RuntimeError):
    """The geocoding service failed; distinct from a place that was not found."""
