from pymongo.database import Database
from repository.base import BaseRepository, to_object_id

class MealRepository(BaseRepository):
    collection = "meals"

    def __init__(self, db: Database):
        super().__init__(db)

    def get_by_ids(self, meal_ids: list) -> list:
        return self.find_many({"_id": {"$in": [to_object_id(meal_id) for meal_id in meal_ids]}})

    def delete_for_restaurant(self, restaurant_id):
        return self.delete_many({"restaurant_id": to_object_id(restaurant_id)})
