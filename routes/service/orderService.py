from typing import List, Dict, Any
from fastapi import HTTPException
from pymongo.database import Database
import logging

from configurations.config import settings
from configurations.custom_json_encoder import serialize_doc, serialize_docs
from operations import order_lifecycle
from operations.order_lifecycle import OrderTransitionError
from repository.base import parse_object_id
from repository.orderRepo import OrderRepository
from repository.restaurantRepo import RestaurantRepository
from repository.userRepo import UserRepository
from schema.orderSystemSchema import OrderMealIn
from schema.user import UserOutput, CUSTOMER, RESTAURANT_OWNER

logger = logging.getLogger(__name__)


class OrderService:
    def __init__(self, db: Database):
        self._orderRepository = OrderRepository(db)
        self._restaurantRepository = RestaurantRepository(db)
        self._userRepository = UserRepository(db)

    def place_order(self, customer_id: str, meals: List[OrderMealIn], delivery_method: str) -> List[Dict[str, Any]]:
        """
        Split a cart into one order per restaurant and queue each of them.

        Orders are written one restaurant at a time; a failure partway leaves
        the orders already inserted in place.
        """
        if not meals:
            raise HTTPException(status_code=400, detail="meals must be a non-empty list")

        line_items = []
        for meal in meals:
            if not meal.restaurant_id:
                raise HTTPException(status_code=400, detail=f"restaurant_id missing for meal: {meal.name}")
            line_items.append({
                "meal_id": parse_object_id(meal.meal_id, f"Invalid meal id: {meal.meal_id}"),
                "name": meal.name,
                "quantity": meal.quantity,
                "unit_price": meal.unit_price,
                "preparation_time": meal.preparation_time,
                "restaurant_id": parse_object_id(meal.restaurant_id, f"Invalid restaurant_id: {meal.restaurant_id}")
            })

        customer = self._userRepository.get_user_by_id(customer_id)
        if not customer:
            raise HTTPException(status_code=404, detail="User not found")

        grouped = order_lifecycle.group_meals_by_restaurant(line_items, settings.DEFAULT_PREPARATION_TIME)

        # TODO: serialize queue admission per restaurant with a conditional update on the
        # restaurant document; until then two concurrent orders on an idle restaurant
        # can both start in preparation
        created = []
        for restaurant_id, items in grouped.items():
            pending = self._orderRepository.get_undelivered_for_restaurant(restaurant_id)
            order = order_lifecycle.build_order(
                customer,
                restaurant_id,
                items,
                delivery_method,
                pending,
                order_lifecycle.format_order_date(timezone=settings.ORDER_TIMEZONE)
            )
            order["_id"] = self._orderRepository.insert(order)
            logger.info(f"Order {order['_id']} queued at restaurant {restaurant_id} as '{order['status']}', wait {order['wait_time']} min")
            created.append(order)

        return serialize_docs(created)

    def advance_order(self, owner: UserOutput, order_id: str) -> str:
        order_object_id = parse_object_id(order_id, "Invalid order id")

        restaurant = self._restaurantRepository.get_by_owner(owner.id)
        if not restaurant:
            raise HTTPException(status_code=404, detail="Restaurant not found")

        order = self._orderRepository.find_by_id(order_object_id)
        if not order:
            raise HTTPException(status_code=404, detail="Order not found")

        if order["restaurant_id"] != restaurant["_id"]:
            raise HTTPException(status_code=403, detail="You cannot modify orders of other restaurants")

        try:
            new_status = order_lifecycle.next_owner_status(order)
        except OrderTransitionError as error:
            logger.warning(f"Refused transition for order {order_id}: {error}")
            raise HTTPException(status_code=400, detail=str(error))

        self._commit_status(order, new_status)
        return new_status

    def confirm_delivery(self, customer: UserOutput, order_id: str) -> Dict[str, Any]:
        order_object_id = parse_object_id(order_id, "Invalid order id")

        order = self._orderRepository.find_by_id(order_object_id)
        if not order:
            raise HTTPException(status_code=404, detail="Order not found")

        if str(order["customer_id"]) != customer.id:
            raise HTTPException(status_code=403, detail="You cannot modify orders of other customers")

        try:
            new_status = order_lifecycle.confirm_delivery_status(order)
        except OrderTransitionError as error:
            logger.warning(f"Refused delivery confirmation for order {order_id}: {error}")
            raise HTTPException(status_code=400, detail=str(error))

        return serialize_doc(self._commit_status(order, new_status))

    def _commit_status(self, order: Dict[str, Any], new_status: str) -> Dict[str, Any]:
        updated = self._orderRepository.set_status(order["_id"], order["status"], new_status)
        if updated is None:
            raise HTTPException(status_code=409, detail="Order status changed concurrently, retry the request")
        logger.info(f"Order {order['_id']} moved from '{order['status']}' to '{new_status}'")
        return updated

    def list_orders(self, user: UserOutput) -> List[Dict[str, Any]]:
        if user.role == CUSTOMER:
            orders = self._orderRepository.get_for_customer(user.id)
        elif user.role == RESTAURANT_OWNER:
            restaurant = self._restaurantRepository.get_by_owner(user.id)
            if not restaurant:
                raise HTTPException(status_code=404, detail="Restaurant not found")
            orders = self._orderRepository.get_for_restaurant(restaurant["_id"])
        else:
            raise HTTPException(status_code=403, detail="Access denied")

        names = {}
        for order in orders:
            restaurant_id = order.get("restaurant_id")
            if restaurant_id not in names:
                restaurant = self._restaurantRepository.find_by_id(restaurant_id)
                names[restaurant_id] = restaurant["name"] if restaurant else "Unknown restaurant"
            order["restaurant_name"] = names[restaurant_id]
        return serialize_docs(orders)

    def get_order(self, user: UserOutput, order_id: str) -> Dict[str, Any]:
        order_object_id = parse_object_id(order_id, "Invalid order id")

        order = self._orderRepository.find_by_id(order_object_id)
        if not order:
            raise HTTPException(status_code=404, detail="Order not found")

        if user.role == CUSTOMER:
            allowed = str(order["customer_id"]) == user.id
        elif user.role == RESTAURANT_OWNER:
            restaurant = self._restaurantRepository.get_by_owner(user.id)
            allowed = restaurant is not None and order["restaurant_id"] == restaurant["_id"]
        else:
            allowed = False

        if not allowed:
            raise HTTPException(status_code=403, detail="Access to this order denied")
        return serialize_doc(order)
