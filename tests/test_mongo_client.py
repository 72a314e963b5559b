import pytest

from finder.core.errors import StoreNotReadyError
from finder.core.mongo_client import MongoRestaurantRepository, MongoStoreHandle
from finder.models.request_models import GeoQuery
from finder.services.listing_service import get_restaurant


class FakeCollection:
    """Records the queries a repository sends and replays canned results."""

    def __init__(self, aggregate_result=None, find_one_result=None, find_result=None):
        self.aggregate_result = aggregate_result or []
        self.find_one_result = find_one_result
        self.find_result = find_result or []
        self.pipelines = []
        self.filters = []

    def aggregate(self, pipeline):
        self.pipelines.append(pipeline)
        return iter(self.aggregate_result)

    def find_one(self, flt, projection=None):
        self.filters.append(flt)
        return self.find_one_result

    def find(self, flt, projection=None):
        self.filters.append(flt)
        return iter(self.find_result)


def _entry(res_id, cuisines="Cafe"):
    return {"restaurant": {"R": {"res_id": res_id}, "name": f"r{res_id}", "cuisines": cuisines}}


def test_count_entries_unwinds_documents():
    collection = FakeCollection(aggregate_result=[{"total": 42}])
    assert MongoRestaurantRepository(collection).count_entries() == 42
    assert collection.pipelines[0] == [{"$unwind": "$restaurants"}, {"$count": "total"}]


def test_count_entries_on_empty_collection():
    assert MongoRestaurantRepository(FakeCollection()).count_entries() == 0


def test_list_entries_sorts_skips_and_limits():
    collection = FakeCollection()
    MongoRestaurantRepository(collection).list_entries(skip=18, limit=9)
    stages = collection.pipelines[0]

    assert stages[0] == {"$unwind": "$restaurants"}
    assert {"$sort": {"_rating": -1}} in stages
    assert {"$skip": 18} in stages
    assert {"$limit": 9} in stages
    assert stages[-1] == {"$replaceRoot": {"newRoot": "$restaurants"}}


def test_search_entries_escapes_user_text():
    collection = FakeCollection(aggregate_result=[{"total": [{"total": 3}], "data": [_entry(1)]}])
    total, data = MongoRestaurantRepository(collection).search_entries("c++ (bar)", 0, 9)

    assert total == 3
    assert data == [_entry(1)]
    match = collection.pipelines[0][1]["$match"]["$or"][0]["restaurants.restaurant.name"]
    assert match == {"$regex": r"c\+\+\ \(bar\)", "$options": "i"}


def test_search_entries_without_hits():
    collection = FakeCollection(aggregate_result=[{"total": [], "data": []}])
    assert MongoRestaurantRepository(collection).search_entries("zzz", 0, 9) == (0, [])


def test_find_within_radius_sends_geo_pipeline():
    collection = FakeCollection(aggregate_result=[_entry(7)])
    found = MongoRestaurantRepository(collection).find_within_radius(GeoQuery(lat=1.5, lng=2.5, radius=6.3781))

    assert found == [_entry(7)]
    match = collection.pipelines[0][2]["$match"]
    center, radius = match["restaurants.restaurant.location.coordinates"]["$geoWithin"]["$centerSphere"]
    assert center == [2.5, 1.5]
    assert radius == pytest.approx(0.001)


def test_lookup_scans_the_owning_document():
    document = {"restaurants": [_entry(1), _entry(2), _entry(3)]}
    collection = FakeCollection(find_one_result=document)
    repo = MongoRestaurantRepository(collection)

    assert get_restaurant(repo, 2)["name"] == "r2"
    assert collection.filters[0] == {"restaurants.restaurant.R.res_id": 2}


def test_lookup_not_found():
    repo = MongoRestaurantRepository(FakeCollection(find_one_result=None))
    assert get_restaurant(repo, 5) is None

    # owner found but no entry carries the id
    repo = MongoRestaurantRepository(FakeCollection(find_one_result={"restaurants": [_entry(1)]}))
    assert get_restaurant(repo, 5) is None


def test_find_by_cuisines_filters_entries_inside_documents():
    documents = [
        {"restaurants": [_entry(1, "Italian, Pizza"), _entry(2, "Chinese")]},
        {"restaurants": [_entry(3, "North Indian")]},
    ]
    collection = FakeCollection(find_result=documents)
    found = MongoRestaurantRepository(collection).find_by_cuisines(["Italian", "Indian"])

    assert [e["restaurant"]["R"]["res_id"] for e in found] == [1, 3]
    assert collection.filters[0] == {
        "restaurants.restaurant.cuisines": {"$regex": "Italian|Indian", "$options": "i"}
    }


def test_handle_without_uri_never_becomes_ready():
    handle = MongoStoreHandle(None, "project", "restaurantlist")
    with pytest.raises(RuntimeError):
        handle.connect()
    assert handle.state == "failed"
    with pytest.raises(StoreNotReadyError):
        handle.repository()
