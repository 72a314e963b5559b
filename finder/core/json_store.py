# backend/finder/core/json_store.py
"""
JSON-file backed store.

Serves the same repository contract as the MongoDB store from a local dump
of list documents (the file the bulk import reads). Queries run in Python;
the radius search uses the haversine spherical-cap test instead of
$centerSphere.
"""

import copy
import json

from finder.core.store import StoreHandle
from finder.services.data_normalizer import matches_cuisines, matches_text, sort_by_rating, entry_res_id
from finder.services.geo_service import entry_coordinates, is_within_radius


class JsonRestaurantRepository:
    def __init__(self, documents):
        self.documents = documents

    def _entries(self):
        for doc in self.documents:
            for entry in doc.get("restaurants") or []:
                yield entry

    def count_entries(self) -> int:
        return sum(1 for _ in self._entries())

    def list_entries(self, skip: int, limit: int) -> list:
        return copy.deepcopy(sort_by_rating(self._entries())[skip:skip + limit])

    def search_entries(self, text: str, skip: int, limit: int):
        hits = sort_by_rating(e for e in self._entries() if matches_text(e, text))
        return len(hits), copy.deepcopy(hits[skip:skip + limit])

    def find_owner_document(self, res_id: int):
        for doc in self.documents:
            if any(entry_res_id(e) == res_id for e in doc.get("restaurants") or []):
                return copy.deepcopy(doc)
        return None

    def find_within_radius(self, query) -> list:
        found = []
        for entry in self._entries():
            if is_within_radius(entry, query):
                entry = copy.deepcopy(entry)
                entry["restaurant"]["location"]["coordinates"] = entry_coordinates(entry)
                found.append(entry)
        return found

    def find_by_cuisines(self, cuisines) -> list:
        return [copy.deepcopy(e) for e in self._entries() if matches_cuisines(e, cuisines)]


class JsonStoreHandle(StoreHandle):
    name = "JSON store"

    def __init__(self, path):
        super().__init__()
        self.path = path

    def _open(self):
        with open(self.path, "r", encoding="utf-8") as f:
            documents = json.load(f)
        if not isinstance(documents, list):
            raise ValueError(f"{self.path} must contain a JSON array of list documents")
        return JsonRestaurantRepository(documents)
