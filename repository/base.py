from pymongo.database import Database
from bson import ObjectId
from operations.rules import Rules
from fastapi import HTTPException


def to_object_id(value):
    if isinstance(value, ObjectId):
        return value
    return ObjectId(value)


def parse_object_id(value, detail: str = "Invalid id"):
    if value is None or not ObjectId.is_valid(value):
        raise HTTPException(status_code=400, detail=detail)
    return to_object_id(value)


class BaseRepository:
    collection: str = None

    def __init__(self, db: Database):
        self.db = db

    def find_one(self, query: dict, projection: dict = None):
        return Rules.get(query, self.db, self.collection, projection)

    def find_by_id(self, document_id, projection: dict = None):
        return self.find_one({"_id": to_object_id(document_id)}, projection)

    def find_many(self, query: dict) -> list:
        return Rules.get_many(query, self.db, self.collection)

    def insert(self, data: dict):
        return Rules.add(data, self.db, self.collection)

    def update(self, query: dict, data: dict, upsert: bool = False):
        return Rules.update(query, data, self.db, self.collection, upsert=upsert)

    def find_and_update(self, query: dict, data: dict, projection: dict = None):
        return Rules.get_and_update(query, data, self.db, self.collection, projection)

    def delete(self, query: dict):
        return Rules.delete(query, self.db, self.collection)

    def delete_many(self, query: dict):
        return Rules.delete_many(query, self.db, self.collection)
