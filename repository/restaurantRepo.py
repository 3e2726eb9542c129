import re
from pymongo.database import Database
from repository.base import BaseRepository, to_object_id

class RestaurantRepository(BaseRepository):
    collection = "restaurants"

    def __init__(self, db: Database):
        super().__init__(db)

    def get_by_owner(self, owner_id):
        return self.find_one({"owner_id": to_object_id(owner_id)})

    def search(self, name: str = None, address: str = None) -> list:
        query = {}
        if name:
            query["name"] = {"$regex": re.escape(name), "$options": "i"}
        if address:
            query["address"] = {"$regex": re.escape(address), "$options": "i"}
        return self.find_many(query)

    def add_to_menu(self, restaurant_id, meal_id):
        return self.update({"_id": to_object_id(restaurant_id)}, {"$push": {"menu": meal_id}})

    def remove_from_menu(self, restaurant_id, meal_id):
        return self.update({"_id": to_object_id(restaurant_id)}, {"$pull": {"menu": meal_id}})
