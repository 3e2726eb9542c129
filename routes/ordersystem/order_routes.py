from fastapi import APIRouter, Depends, HTTPException
from typing import List
from pymongo.database import Database
import logging

from configurations.config import get_db
from routes.security.decorators import authorize
from routes.service.orderService import OrderService
from schema.orderSystemSchema import OrderCreate, Order, OrderStatusUpdate
from schema.user import UserOutput, CUSTOMER, RESTAURANT_OWNER

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", status_code=201)
async def place_order(
    order_details: OrderCreate,
    current_user: UserOutput = Depends(authorize([CUSTOMER], "Only customers can place orders")),
    db: Database = Depends(get_db)
):
    """
    Place an order from cart items, one order is created per restaurant.
    """
    try:
        orders = OrderService(db).place_order(current_user.id, order_details.meals, order_details.delivery_method)
        return {"message": "Orders created successfully", "orders": orders}
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error creating order: {error}")
        raise HTTPException(status_code=500, detail="Error creating order")


@router.get("", response_model=List[Order])
async def get_orders(
    current_user: UserOutput = Depends(authorize([CUSTOMER, RESTAURANT_OWNER], "Access denied")),
    db: Database = Depends(get_db)
):
    """
    Customers see their own orders, owners the orders of their restaurant.
    """
    try:
        return OrderService(db).list_orders(current_user)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error retrieving orders: {error}")
        raise HTTPException(status_code=500, detail="Error retrieving orders")


@router.get("/{order_id}", response_model=Order)
async def get_order(
    order_id: str,
    current_user: UserOutput = Depends(authorize([CUSTOMER, RESTAURANT_OWNER], "Access denied")),
    db: Database = Depends(get_db)
):
    try:
        return OrderService(db).get_order(current_user, order_id)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error retrieving order {order_id}: {error}")
        raise HTTPException(status_code=500, detail="Error retrieving order")


@router.put("/{order_id}", response_model=OrderStatusUpdate)
async def advance_order(
    order_id: str,
    current_user: UserOutput = Depends(authorize([RESTAURANT_OWNER], "Only restaurant owners can change the order status")),
    db: Database = Depends(get_db)
):
    """
    Move an order one step forward on behalf of the restaurant.
    """
    try:
        new_status = OrderService(db).advance_order(current_user, order_id)
        return {"message": "Order status updated", "status": new_status}
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error updating order {order_id}: {error}")
        raise HTTPException(status_code=500, detail="Error updating order")


@router.put("/{order_id}/consegna", response_model=Order)
async def confirm_delivery(
    order_id: str,
    current_user: UserOutput = Depends(authorize([CUSTOMER], "Only customers can confirm the delivery")),
    db: Database = Depends(get_db)
):
    """
    Customer confirms receipt of a home delivery order.
    """
    try:
        return OrderService(db).confirm_delivery(current_user, order_id)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error confirming delivery for order {order_id}: {error}")
        raise HTTPException(status_code=500, detail="Error confirming delivery")
