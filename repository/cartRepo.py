from pymongo.database import Database
from repository.base import BaseRepository, to_object_id

class CartRepository(BaseRepository):
    collection = "carts"

    def __init__(self, db: Database):
        super().__init__(db)

    def get_cart(self, user_id):
        return self.find_one({"user_id": to_object_id(user_id)})

    def save_meals(self, user_id, meals: list):
        return self.update(
            {"user_id": to_object_id(user_id)},
            {"$set": {"user_id": to_object_id(user_id), "meals": meals}},
            upsert=True
        )

    def delete_cart(self, user_id):
        return self.delete({"user_id": to_object_id(user_id)})
