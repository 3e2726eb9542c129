import re
from typing import Dict, Any, List
from fastapi import HTTPException
from pymongo.database import Database
import logging

from configurations.custom_json_encoder import serialize_doc, serialize_docs
from repository.base import parse_object_id
from repository.mealRepo import MealRepository
from repository.restaurantRepo import RestaurantRepository
from schema.meal import MealCreate, MealUpdate
from schema.user import UserOutput

logger = logging.getLogger(__name__)


class MealService:
    def __init__(self, db: Database):
        self._mealRepository = MealRepository(db)
        self._restaurantRepository = RestaurantRepository(db)

    def list_meals(self, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        query = {}
        if filters.get("category"):
            query["category"] = filters["category"]
        if filters.get("area"):
            query["area"] = filters["area"]
        if filters.get("name"):
            query["name"] = {"$regex": re.escape(filters["name"]), "$options": "i"}
        if filters.get("min_price") is not None or filters.get("max_price") is not None:
            query["price"] = {}
            if filters.get("min_price") is not None:
                query["price"]["$gte"] = filters["min_price"]
            if filters.get("max_price") is not None:
                query["price"]["$lte"] = filters["max_price"]
        if filters.get("restaurant_id"):
            query["restaurant_id"] = parse_object_id(filters["restaurant_id"], "Invalid restaurant_id")

        return serialize_docs(self._mealRepository.find_many(query))

    def get_meal(self, meal_id: str) -> Dict[str, Any]:
        meal = self._mealRepository.find_by_id(parse_object_id(meal_id, "Invalid meal id"))
        if not meal:
            raise HTTPException(status_code=404, detail="Meal not found")
        return serialize_doc(meal)

    def create_meal(self, owner: UserOutput, details: MealCreate) -> Dict[str, Any]:
        restaurant = self._restaurantRepository.get_by_owner(owner.id)
        if not restaurant:
            raise HTTPException(status_code=403, detail="Create a restaurant before adding meals")

        meal = details.model_dump()
        meal["restaurant_id"] = restaurant["_id"]
        meal["_id"] = self._mealRepository.insert(meal)
        self._restaurantRepository.add_to_menu(restaurant["_id"], meal["_id"])
        logger.info(f"Meal {meal['_id']} added to restaurant {restaurant['_id']}")
        return serialize_doc(meal)

    def _owned_meal(self, owner: UserOutput, meal_id: str, action: str) -> Dict[str, Any]:
        meal_object_id = parse_object_id(meal_id, "Invalid meal id")

        restaurant = self._restaurantRepository.get_by_owner(owner.id)
        if not restaurant:
            raise HTTPException(status_code=403, detail="Create a restaurant first")

        meal = self._mealRepository.find_by_id(meal_object_id)
        if not meal:
            raise HTTPException(status_code=404, detail="Meal not found")

        # general catalog meals belong to no restaurant
        if not meal.get("restaurant_id"):
            raise HTTPException(status_code=403, detail=f"Cannot {action} general meals")

        if meal["restaurant_id"] != restaurant["_id"]:
            raise HTTPException(status_code=403, detail="Access denied: not the meal owner")
        return meal

    def update_meal(self, owner: UserOutput, meal_id: str, details: MealUpdate) -> Dict[str, Any]:
        meal = self._owned_meal(owner, meal_id, "modify")

        fields = details.model_dump(exclude_none=True)
        if not fields:
            raise HTTPException(status_code=400, detail="No valid field to update")

        ingredients = fields.get("ingredients", meal.get("ingredients") or [])
        measures = fields.get("measures", meal.get("measures") or [])
        if len(ingredients) != len(measures):
            raise HTTPException(status_code=400, detail="measures must have the same length as ingredients")

        updated = self._mealRepository.find_and_update({"_id": meal["_id"]}, {"$set": fields})
        if not updated:
            raise HTTPException(status_code=404, detail="Meal not found")
        return serialize_doc(updated)

    def delete_meal(self, owner: UserOutput, meal_id: str) -> None:
        meal = self._owned_meal(owner, meal_id, "delete")

        result = self._mealRepository.delete({"_id": meal["_id"]})
        if result.deleted_count == 0:
            raise HTTPException(status_code=404, detail="Meal not found")
        self._restaurantRepository.remove_from_menu(meal["restaurant_id"], meal["_id"])
        logger.info(f"Meal {meal['_id']} removed from restaurant {meal['restaurant_id']}")
