# backend/finder/services/data_normalizer.py

from finder.models.response_models import ReducedRestaurant

REDUCED_FIELDS = (
    "name",
    "location",
    "cuisines",
    "user_rating",
    "price_range",
    "featured_image",
    "menu_url",
    "url",
)


def _restaurant(entry):
    return (entry or {}).get("restaurant") or {}


def entry_res_id(entry):
    """
    Nested `restaurant.R.res_id`, or None when absent.
    """
    r = _restaurant(entry).get("R") or {}
    return r.get("res_id")


def entry_rating(entry) -> float:
    # Zomato dumps store the rating as a string ("4.5"); unparsable sorts last
    rating = (_restaurant(entry).get("user_rating") or {}).get("aggregate_rating")
    try:
        return float(rating)
    except (TypeError, ValueError):
        return 0.0


def sort_by_rating(entries):
    return sorted(entries, key=entry_rating, reverse=True)


def matches_cuisines(entry, cuisines) -> bool:
    """
    True when the entry's comma separated `cuisines` string contains
    any of the given cuisine names (case-insensitive substring).
    """
    text = str(_restaurant(entry).get("cuisines") or "").lower()
    return any(c.lower() in text for c in cuisines)


def matches_text(entry, query: str) -> bool:
    q = query.strip().lower()
    r = _restaurant(entry)
    name = str(r.get("name") or "").lower()
    cuisines = str(r.get("cuisines") or "").lower()
    return q in name or q in cuisines


def reduce_restaurant(entry) -> ReducedRestaurant:
    r = _restaurant(entry)
    return ReducedRestaurant(**{field: r.get(field) for field in REDUCED_FIELDS})
