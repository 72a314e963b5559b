import logging

from geopy.exc import GeopyError
from geopy.geocoders import Nominatim
from math import radians, sin, cos, asin, sqrt, isfinite

from pydantic import ValidationError

from finder.core.errors import GeocodingError, InvalidQueryError
from finder.models.request_models import GeoQuery

logger = logging.getLogger(__name__)

# Earth's mean radius as used for $centerSphere radius conversion
EARTH_RADIUS_KM = 6378.1

geolocator = Nominatim(user_agent="restaurant-finder")


def geocode_text_location(text: str):
    """
    Convert typed location name → (lat, lng).
    Returns (None, None) if not found; raises GeocodingError when the
    geocoder itself fails.
    """
    try:
        result = geolocator.geocode(text)
    except GeopyError as e:
        logger.exception(f"Geocoding failed for {text!r}")
        raise GeocodingError("Geocoding service unavailable") from e

    if not result:
        return None, None
    return float(result.latitude), float(result.longitude)


def parse_geo_query(args) -> GeoQuery:
    """Validate raw lat/lng/radius query args. Raises InvalidQueryError before any store work."""
    if not all(args.get(k) not in (None, "") for k in ("lat", "lng", "radius")):
        raise InvalidQueryError("Latitude, longitude, and radius are required.")
    try:
        return GeoQuery(lat=args["lat"], lng=args["lng"], radius=args["radius"])
    except ValidationError:
        raise InvalidQueryError("Invalid latitude, longitude, or radius values.")


def radius_to_radians(radius_km: float) -> float:
    return radius_km / EARTH_RADIUS_KM


def angular_distance(lat1, lon1, lat2, lon2):
    """Haversine formula → central angle in radians."""
    dlat = radians(lat2 - lat1)
    dlon = radians(lon2 - lon1)

    a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(
        dlon / 2
    ) ** 2
    return 2 * asin(min(1.0, sqrt(a)))


def entry_coordinates(entry: dict):
    """[longitude, latitude] of a restaurant entry cast to float, or None if unusable."""
    location = (entry.get("restaurant") or {}).get("location") or {}
    try:
        lng = float(location.get("longitude"))
        lat = float(location.get("latitude"))
    except (TypeError, ValueError):
        return None
    if not (isfinite(lng) and isfinite(lat)):
        return None
    return [lng, lat]


def is_within_radius(entry: dict, query: GeoQuery) -> bool:
    coords = entry_coordinates(entry)
    if coords is None:
        return False
    lng, lat = coords
    return angular_distance(query.lat, query.lng, lat, lng) <= radius_to_radians(query.radius_km)


def build_geo_pipeline(query: GeoQuery) -> list:
    """Aggregation pipeline: unwind entries, cast coordinates, spherical-cap match."""
    location = "$restaurants.restaurant.location"
    return [
        {"$unwind": "$restaurants"},
        {
            "$addFields": {
                "restaurants.restaurant.location.coordinates": [
                    {"$convert": {"input": f"{location}.longitude", "to": "double", "onError": None, "onNull": None}},
                    {"$convert": {"input": f"{location}.latitude", "to": "double", "onError": None, "onNull": None}},
                ]
            }
        },
        {
            "$match": {
                "restaurants.restaurant.location.coordinates": {
                    "$geoWithin": {
                        "$centerSphere": [[query.lng, query.lat], radius_to_radians(query.radius_km)]
                    }
                }
            }
        },
        {"$replaceRoot": {"newRoot": "$restaurants"}},
    ]
