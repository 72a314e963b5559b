# backend/finder/services/listing_service.py

import math

from finder.core.errors import InvalidQueryError
from finder.models.request_models import PageRequest
from finder.models.response_models import PageResponse
from finder.services.data_normalizer import entry_res_id


def _page(page_request: PageRequest, total: int, entries) -> PageResponse:
    # a page goes out as one list document so clients read
    # data[*].restaurants like the stored records
    return PageResponse(
        page=page_request.page,
        limit=page_request.limit,
        total_results=total,
        total_pages=math.ceil(total / page_request.limit),
        data=[{"restaurants": list(entries)}] if entries else [],
    )


def list_restaurants(repository, page_request: PageRequest) -> PageResponse:
    total = repository.count_entries()
    entries = repository.list_entries(page_request.skip, page_request.limit)
    return _page(page_request, total, entries)


def search_restaurants(repository, text, page_request: PageRequest) -> PageResponse:
    if not text or not text.strip():
        raise InvalidQueryError("Search text is required.")
    total, entries = repository.search_entries(text, page_request.skip, page_request.limit)
    return _page(page_request, total, entries)


def get_restaurant(repository, res_id: int):
    """
    Owning list document first, then a linear scan of its entries.
    Returns the inner restaurant dict, or None.
    """
    document = repository.find_owner_document(res_id)
    if not document:
        return None
    for entry in document.get("restaurants") or []:
        if entry_res_id(entry) == res_id:
            return entry.get("restaurant")
    return None
