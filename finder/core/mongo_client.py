import re

from pymongo import MongoClient, DESCENDING

from finder.core.store import StoreHandle
from finder.services.data_normalizer import matches_cuisines
from finder.services.geo_service import build_geo_pipeline

ENTRY = "$restaurants"
RATING = {
    "$convert": {
        "input": "$restaurants.restaurant.user_rating.aggregate_rating",
        "to": "double",
        "onError": 0,
        "onNull": 0,
    }
}


def _page_stages(skip: int, limit: int) -> list:
    return [
        {"$addFields": {"_rating": RATING}},
        {"$sort": {"_rating": DESCENDING}},
        {"$skip": skip},
        {"$limit": limit},
        {"$replaceRoot": {"newRoot": ENTRY}},
    ]


class MongoRestaurantRepository:
    """Queries over list documents of shape {restaurants: [{restaurant: {...}}]}."""

    def __init__(self, collection):
        self.collection = collection

    def count_entries(self) -> int:
        rows = list(self.collection.aggregate([{"$unwind": ENTRY}, {"$count": "total"}]))
        return rows[0]["total"] if rows else 0

    def list_entries(self, skip: int, limit: int) -> list:
        return list(self.collection.aggregate([{"$unwind": ENTRY}] + _page_stages(skip, limit)))

    def search_entries(self, text: str, skip: int, limit: int):
        pattern = {"$regex": re.escape(text.strip()), "$options": "i"}
        pipeline = [
            {"$unwind": ENTRY},
            {
                "$match": {
                    "$or": [
                        {"restaurants.restaurant.name": pattern},
                        {"restaurants.restaurant.cuisines": pattern},
                    ]
                }
            },
            {
                "$facet": {
                    "total": [{"$count": "total"}],
                    "data": _page_stages(skip, limit),
                }
            },
        ]
        rows = list(self.collection.aggregate(pipeline))
        facet = rows[0] if rows else {"total": [], "data": []}
        total = facet["total"][0]["total"] if facet["total"] else 0
        return total, facet["data"]

    def find_owner_document(self, res_id: int):
        return self.collection.find_one({"restaurants.restaurant.R.res_id": res_id}, {"_id": 0})

    def find_within_radius(self, query) -> list:
        return list(self.collection.aggregate(build_geo_pipeline(query)))

    def find_by_cuisines(self, cuisines) -> list:
        # the regex narrows documents; entries are filtered again since a
        # matching document can hold non-matching entries
        pattern = "|".join(re.escape(c) for c in cuisines)
        docs = self.collection.find(
            {"restaurants.restaurant.cuisines": {"$regex": pattern, "$options": "i"}},
            {"_id": 0},
        )
        return [
            entry
            for doc in docs
            for entry in doc.get("restaurants") or []
            if matches_cuisines(entry, cuisines)
        ]


class MongoStoreHandle(StoreHandle):
    name = "MongoDB"

    def __init__(self, uri, db_name, collection_name, timeout_ms=5000):
        super().__init__()
        self.uri = uri
        self.db_name = db_name
        self.collection_name = collection_name
        self.timeout_ms = timeout_ms
        self.client = None

    def _open(self):
        if not self.uri:
            raise RuntimeError("MONGO_URI is not set")
        client = MongoClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
        try:
            client.admin.command("ping")
        except Exception:
            client.close()
            raise
        self.client = client
        return MongoRestaurantRepository(client[self.db_name][self.collection_name])

    def _close(self):
        if self.client is not None:
            self.client.close()
            self.client = None
