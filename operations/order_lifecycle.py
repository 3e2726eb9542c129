from typing import Dict, Any, List, Optional
from datetime import datetime
from zoneinfo import ZoneInfo
import logging

logger = logging.getLogger(__name__)

ORDER_STATES = ["ordered", "in-preparation", "in-delivery", "delivered"]
ORDERED, IN_PREPARATION, IN_DELIVERY, DELIVERED = ORDER_STATES

# orders still waiting on the kitchen, these count towards the queue wait time
OPEN_STATES = [ORDERED, IN_PREPARATION]

PICKUP = "pickup"
HOME_DELIVERY = "home delivery"

DEFAULT_PREPARATION_TIME = 10
ORDER_DATE_FORMAT = "%d/%m/%Y - %H:%M"
TOP_MEALS_LIMIT = 5


class OrderTransitionError(ValueError):
    """Raised when an order cannot move to the requested status."""


def group_meals_by_restaurant(meals: List[Dict[str, Any]], default_preparation_time: int = DEFAULT_PREPARATION_TIME) -> Dict[Any, List[Dict[str, Any]]]:
    """
    Partition cart line items by restaurant.

    Args:
        meals: Line items, each carrying a ``restaurant_id``
        default_preparation_time: Minutes used when an item has no preparation time

    Returns:
        Dict of restaurant id to order line items, in first-seen order
    """
    grouped: Dict[Any, List[Dict[str, Any]]] = {}
    for meal in meals:
        preparation_time = meal.get("preparation_time")
        if preparation_time is None:
            preparation_time = default_preparation_time
        grouped.setdefault(meal["restaurant_id"], []).append({
            "meal_id": meal["meal_id"],
            "name": meal.get("name"),
            "quantity": meal["quantity"],
            "unit_price": meal["unit_price"],
            "preparation_time": preparation_time
        })
    return grouped


def order_total(items: List[Dict[str, Any]]) -> float:
    return sum(item["quantity"] * item["unit_price"] for item in items)


def preparation_time(items: List[Dict[str, Any]]) -> float:
    return sum(item["quantity"] * item["preparation_time"] for item in items)


def initial_status(pending_orders: List[Dict[str, Any]]) -> str:
    """An order becomes the queue head when nothing undelivered is ahead of it."""
    return IN_PREPARATION if not pending_orders else ORDERED


def queue_wait_time(items: List[Dict[str, Any]], pending_orders: List[Dict[str, Any]]) -> float:
    """
    Estimate the wait for a new order at creation time.

    The new order's own preparation time plus the stored wait time of every
    order at the restaurant that is still ordered or in preparation.
    """
    wait_time = preparation_time(items)
    for order in pending_orders:
        if order.get("status") in OPEN_STATES:
            wait_time += order.get("wait_time") or 0
    return wait_time


def format_order_date(now: Optional[datetime] = None, timezone: str = "Europe/Rome") -> str:
    if now is None:
        now = datetime.now(ZoneInfo(timezone))
    return now.strftime(ORDER_DATE_FORMAT)


def build_order(customer: Dict[str, Any], restaurant_id, items: List[Dict[str, Any]], delivery_method: str,
                pending_orders: List[Dict[str, Any]], order_date: str) -> Dict[str, Any]:
    return {
        "customer_id": customer["_id"],
        "customer_name": customer.get("username"),
        "restaurant_id": restaurant_id,
        "meals": items,
        "total": order_total(items),
        "status": initial_status(pending_orders),
        "order_date": order_date,
        "delivery_method": delivery_method,
        "wait_time": queue_wait_time(items, pending_orders)
    }


def next_owner_status(order: Dict[str, Any]) -> str:
    """
    Status reached when the restaurant owner advances an order one step.

    Pickup orders skip ``in-delivery``; home delivery orders stop there and
    wait for the customer to confirm receipt.
    """
    status = order.get("status")
    if status not in ORDER_STATES:
        raise OrderTransitionError(f"Unknown order status: {status}")
    index = ORDER_STATES.index(status)

    if order.get("delivery_method") == PICKUP:
        if status == DELIVERED:
            raise OrderTransitionError("Order already delivered")
        if status == IN_PREPARATION:
            return DELIVERED
        return ORDER_STATES[index + 1]

    if index >= 2:
        raise OrderTransitionError("Only the customer can confirm the delivery")
    return ORDER_STATES[index + 1]


def confirm_delivery_status(order: Dict[str, Any]) -> str:
    if order.get("status") != IN_DELIVERY:
        raise OrderTransitionError(f"Delivery can be confirmed only while the order is '{IN_DELIVERY}'")
    return DELIVERED


def restaurant_statistics(orders: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Aggregate a restaurant's full order history.

    Revenue counts every order regardless of status. Top meals are ranked by
    cumulative quantity, ties keep the order in which meals were first seen.
    """
    total_revenue = 0
    orders_by_state: Dict[str, int] = {}
    meal_count: Dict[str, int] = {}
    orders_trend: Dict[str, int] = {}

    for order in orders:
        total_revenue += order.get("total", 0)
        status = order.get("status")
        orders_by_state[status] = orders_by_state.get(status, 0) + 1
        for meal in order.get("meals", []):
            name = meal.get("name")
            meal_count[name] = meal_count.get(name, 0) + meal.get("quantity", 0)
        order_day = (order.get("order_date") or "").split(" - ")[0]
        orders_trend[order_day] = orders_trend.get(order_day, 0) + 1

    top_meals = sorted(meal_count.items(), key=lambda x: x[1], reverse=True)[:TOP_MEALS_LIMIT]

    return {
        "totalOrders": len(orders),
        "totalRevenue": total_revenue,
        "ordersByState": orders_by_state,
        "topMeals": [[name, quantity] for name, quantity in top_meals],
        "ordersTrend": orders_trend
    }
