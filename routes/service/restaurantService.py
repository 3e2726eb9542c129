from typing import Dict, Any, List
from fastapi import HTTPException
from pymongo.database import Database
from bson import ObjectId
import logging

from configurations.custom_json_encoder import serialize_doc, serialize_docs
from operations.order_lifecycle import restaurant_statistics
from repository.base import parse_object_id
from repository.mealRepo import MealRepository
from repository.orderRepo import OrderRepository
from repository.restaurantRepo import RestaurantRepository
from schema.restaurant import RestaurantCreate, RestaurantUpdate
from schema.user import UserOutput

logger = logging.getLogger(__name__)


def menu_ids(menu: List[str]) -> list:
    return [ObjectId(meal_id) for meal_id in menu if ObjectId.is_valid(meal_id)]


class RestaurantService:
    def __init__(self, db: Database):
        self._restaurantRepository = RestaurantRepository(db)
        self._mealRepository = MealRepository(db)
        self._orderRepository = OrderRepository(db)

    def search(self, name: str = None, address: str = None) -> Dict[str, Any]:
        restaurants = self._restaurantRepository.search(name, address)
        return {"total": len(restaurants), "restaurants": serialize_docs(restaurants)}

    def list_restaurants(self) -> List[Dict[str, Any]]:
        return serialize_docs(self._restaurantRepository.find_many({}))

    def get_restaurant(self, restaurant_id: str) -> Dict[str, Any]:
        restaurant_object_id = parse_object_id(restaurant_id, "Invalid restaurant id")
        restaurant = self._restaurantRepository.find_by_id(restaurant_object_id)
        if not restaurant:
            raise HTTPException(status_code=404, detail="Restaurant not found")

        meal_ids = [meal_id for meal_id in restaurant.get("menu") or [] if ObjectId.is_valid(meal_id)]
        restaurant["meals"] = self._mealRepository.get_by_ids(meal_ids)
        return serialize_doc(restaurant)

    def statistics(self, owner: UserOutput) -> Dict[str, Any]:
        restaurant = self._restaurantRepository.get_by_owner(owner.id)
        if not restaurant:
            raise HTTPException(status_code=404, detail="Restaurant not found")

        orders = self._orderRepository.get_for_restaurant(restaurant["_id"])
        return restaurant_statistics(orders)

    def create_restaurant(self, owner: UserOutput, details: RestaurantCreate) -> Dict[str, Any]:
        if self._restaurantRepository.get_by_owner(owner.id):
            raise HTTPException(status_code=400, detail="You already have a restaurant")

        restaurant = {
            "name": details.name,
            "address": details.address,
            "description": details.description,
            "image": details.image,
            "menu": menu_ids(details.menu),
            "owner_id": ObjectId(owner.id)
        }
        restaurant["_id"] = self._restaurantRepository.insert(restaurant)
        logger.info(f"Restaurant {restaurant['_id']} created for owner {owner.id}")
        return serialize_doc(restaurant)

    def update_restaurant(self, owner: UserOutput, restaurant_id: str, details: RestaurantUpdate) -> Dict[str, Any]:
        restaurant_object_id = parse_object_id(restaurant_id, "Invalid restaurant id")
        restaurant = self._restaurantRepository.find_by_id(restaurant_object_id)
        if not restaurant:
            raise HTTPException(status_code=404, detail="Restaurant not found")

        if str(restaurant["owner_id"]) != owner.id:
            raise HTTPException(status_code=403, detail="Access denied: not the restaurant owner")

        fields = details.model_dump(exclude_none=True)
        if "menu" in fields:
            fields["menu"] = menu_ids(fields["menu"])
        if fields:
            self._restaurantRepository.update({"_id": restaurant_object_id}, {"$set": fields})

        return serialize_doc(self._restaurantRepository.find_by_id(restaurant_object_id))

    def delete_restaurant(self, owner: UserOutput, restaurant_id: str) -> Dict[str, Any]:
        restaurant_object_id = parse_object_id(restaurant_id, "Invalid restaurant id")
        restaurant = self._restaurantRepository.find_one({"_id": restaurant_object_id, "owner_id": ObjectId(owner.id)})
        if not restaurant:
            raise HTTPException(status_code=403, detail="You cannot delete a restaurant you do not own")

        self.purge_restaurant(restaurant_object_id)
        return {"message": "Restaurant, meals and open orders deleted"}

    def purge_restaurant(self, restaurant_id):
        """Remove a restaurant with its meals and undelivered orders; delivered orders are kept."""
        self._mealRepository.delete_for_restaurant(restaurant_id)
        self._orderRepository.delete_undelivered_for_restaurant(restaurant_id)
        self._restaurantRepository.delete({"_id": restaurant_id})
        logger.info(f"Restaurant {restaurant_id} purged")
