from pymongo.database import Database
from repository.base import BaseRepository, to_object_id
from operations.order_lifecycle import DELIVERED

class OrderRepository(BaseRepository):
    collection = "orders"

    def __init__(self, db: Database):
        super().__init__(db)

    def get_undelivered_for_restaurant(self, restaurant_id) -> list:
        return self.find_many({"restaurant_id": to_object_id(restaurant_id), "status": {"$ne": DELIVERED}})

    def get_for_restaurant(self, restaurant_id) -> list:
        return self.find_many({"restaurant_id": to_object_id(restaurant_id)})

    def get_for_customer(self, customer_id) -> list:
        return self.find_many({"customer_id": to_object_id(customer_id)})

    def set_status(self, order_id, expected_status: str, new_status: str):
        # conditional on the status that was read, None when it changed in between
        return self.find_and_update(
            {"_id": to_object_id(order_id), "status": expected_status},
            {"$set": {"status": new_status}}
        )

    def delete_undelivered_for_customer(self, customer_id):
        return self.delete_many({"customer_id": to_object_id(customer_id), "status": {"$ne": DELIVERED}})

    def delete_undelivered_for_restaurant(self, restaurant_id):
        return self.delete_many({"restaurant_id": to_object_id(restaurant_id), "status": {"$ne": DELIVERED}})
