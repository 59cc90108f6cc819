"""Unit tests for the schema-less collection accessor."""

from datetime import datetime

import mongomock
import pytest
from bson import Decimal128, ObjectId

from mongocli.api.database.DocumentCollection import DocumentCollection, cast_filter_ids
from mongocli.api.database.to_jsonable import to_jsonable


@pytest.fixture
def people():
    return DocumentCollection(mongomock.MongoClient()["testdb"]["people"])


class TestDocumentCollection:
    def test_insert_one_returns_id_and_stamps(self, people):
        inserted_id = people.insert_one({"name": "Ann", "profile": {"tags": ["x"]}})
        stored = people.find({"_id": inserted_id})[0]
        assert isinstance(inserted_id, ObjectId)
        assert stored["profile"] == {"tags": ["x"]}
        assert "createdAt" in stored
        assert "updatedAt" in stored

    def test_insert_does_not_mutate_input(self, people):
        document = {"name": "Ann"}
        people.insert_one(document)
        assert document == {"name": "Ann"}

    def test_insert_many_keeps_order(self, people):
        ids = people.insert_many([{"n": 1}, {"n": 2}, {"n": 3}])
        assert [people.find({"_id": i})[0]["n"] for i in ids] == [1, 2, 3]

    def test_insert_many_empty(self, people):
        assert people.insert_many([]) == []

    def test_find_sort_skip_limit(self, people):
        people.insert_many([{"n": n} for n in (3, 1, 5, 2, 4)])
        found = people.find({}, sort=[("n", -1)], skip=1, limit=2)
        assert [d["n"] for d in found] == [4, 3]

    def test_update_many_counts_and_stamps(self, people):
        people.insert_many([{"name": "John", "age": 30}, {"name": "Jane", "age": 25}])
        counts = people.update_many({"name": "John"}, {"$set": {"age": 31}})
        assert counts == {"matched_count": 1, "modified_count": 1}
        john = people.find({"name": "John"})[0]
        assert john["age"] == 31
        assert john["updatedAt"] >= john["createdAt"]

    def test_update_keeps_explicit_updated_at(self, people):
        people.insert_one({"name": "John"})
        when = datetime(2020, 1, 1)
        people.update_many({}, {"$set": {"updatedAt": when}})
        assert people.find({})[0]["updatedAt"] == when

    def test_delete_many_returns_count(self, people):
        people.insert_many([{"s": "x"}, {"s": "x"}, {"s": "y"}])
        assert people.delete_many({"s": "x"}) == 2
        assert people.count_documents({}) == 1

    def test_regex_filter_case_insensitive(self, people):
        people.insert_many([{"name": "SMITH"}, {"name": "jones"}])
        assert people.count_documents({"name": {"$regex": "smi", "$options": "i"}}) == 1

    def test_string_ids_in_filters_match(self, people):
        ids = people.insert_many([{"n": 1}, {"n": 2}, {"n": 3}])
        assert people.count_documents({"_id": str(ids[0])}) == 1
        assert people.find({"_id": {"$in": [str(ids[1]), str(ids[2])]}}, sort=[("n", 1)])[0]["n"] == 2
        assert people.count_documents({"_id": {"$nin": [str(ids[0])]}}) == 2
        assert people.count_documents({"$or": [{"_id": str(ids[0])}, {"n": 3}]}) == 2
        assert people.update_many({"_id": str(ids[0])}, {"$set": {"n": 10}})["matched_count"] == 1
        assert people.delete_many({"_id": {"$eq": str(ids[1])}}) == 1

    def test_non_hex_id_left_as_string(self, people):
        people.insert_one({"_id": "custom-key", "n": 1})
        assert people.count_documents({"_id": "custom-key"}) == 1

    def test_set_must_be_an_object(self, people):
        people.insert_one({"n": 1})
        with pytest.raises(ValueError, match="needs an object"):
            people.update_many({}, {"$set": "x"})


class TestCastFilterIds:
    def test_caller_filter_untouched(self):
        oid = ObjectId()
        query = {"_id": {"$in": [str(oid)]}, "name": "x"}
        cast = cast_filter_ids(query)
        assert cast == {"_id": {"$in": [oid]}, "name": "x"}
        assert query == {"_id": {"$in": [str(oid)]}, "name": "x"}

    def test_other_fields_not_cast(self):
        hex_text = str(ObjectId())
        assert cast_filter_ids({"owner": hex_text}) == {"owner": hex_text}

    def test_empty(self):
        assert cast_filter_ids(None) == {}


class TestToJsonable:
    def test_bson_values_converted(self):
        oid = ObjectId()
        when = datetime(2024, 5, 1, 12, 30)
        value = {"_id": oid, "at": when, "price": Decimal128("9.99"), "nested": [{"id": oid}], "n": 1}
        assert to_jsonable(value) == {
            "_id": str(oid),
            "at": "2024-05-01T12:30:00",
            "price": "9.99",
            "nested": [{"id": str(oid)}],
            "n": 1,
        }
