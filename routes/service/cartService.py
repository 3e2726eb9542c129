from typing import Dict, Any
from fastapi import HTTPException
from pymongo.database import Database

from configurations.custom_json_encoder import serialize_doc
from repository.base import parse_object_id
from repository.cartRepo import CartRepository
from schema.cart import CartAdd
from schema.user import UserOutput


class CartService:
    def __init__(self, db: Database):
        self._cartRepository = CartRepository(db)

    def get_cart(self, user: UserOutput) -> Dict[str, Any]:
        cart = self._cartRepository.get_cart(user.id)
        if not cart:
            raise HTTPException(status_code=404, detail="Cart empty or not found")
        return serialize_doc(cart)

    def add_meal(self, user: UserOutput, entry: CartAdd) -> Dict[str, Any]:
        meal_id = parse_object_id(entry.meal_id, "Invalid meal id")
        restaurant_id = parse_object_id(entry.restaurant_id, "Invalid restaurant_id")

        cart = self._cartRepository.get_cart(user.id) or {"meals": []}
        meals = cart["meals"]

        # same meal from the same restaurant only bumps the quantity
        for meal in meals:
            if meal["meal_id"] == meal_id and meal["restaurant_id"] == restaurant_id:
                meal["quantity"] += entry.quantity
                break
        else:
            meals.append({
                "meal_id": meal_id,
                "name": entry.name,
                "quantity": entry.quantity,
                "unit_price": entry.unit_price,
                "restaurant_id": restaurant_id
            })

        self._cartRepository.save_meals(user.id, meals)
        return serialize_doc(self._cartRepository.get_cart(user.id))

    def remove_meal(self, user: UserOutput, meal_id: str) -> Dict[str, Any]:
        meal_object_id = parse_object_id(meal_id, "Invalid meal id")

        cart = self._cartRepository.get_cart(user.id)
        if not cart or not cart.get("meals"):
            raise HTTPException(status_code=404, detail="Cart empty or not found")

        meals = [meal for meal in cart["meals"] if meal["meal_id"] != meal_object_id]
        if not meals:
            self._cartRepository.delete_cart(user.id)
            return {"message": "Cart deleted because it is empty"}

        self._cartRepository.save_meals(user.id, meals)
        return serialize_doc(self._cartRepository.get_cart(user.id))

    def delete_cart(self, user: UserOutput) -> Dict[str, Any]:
        self._cartRepository.delete_cart(user.id)
        return {"message": "Cart deleted"}
