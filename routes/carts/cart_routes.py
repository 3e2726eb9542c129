from fastapi import APIRouter, Depends, HTTPException
from typing import Dict, Any
from pymongo.database import Database
import logging

from configurations.config import get_db
from routes.security.protected_authorise import get_current_user
from routes.service.cartService import CartService
from schema.cart import CartAdd, CartRemove
from schema.user import UserOutput

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/me", response_model=Dict[str, Any])
async def get_cart(current_user: UserOutput = Depends(get_current_user), db: Database = Depends(get_db)):
    try:
        return CartService(db).get_cart(current_user)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error retrieving cart: {error}")
        raise HTTPException(status_code=500, detail="Error retrieving cart")


@router.put("/add", response_model=Dict[str, Any])
async def add_to_cart(
    entry: CartAdd,
    current_user: UserOutput = Depends(get_current_user),
    db: Database = Depends(get_db)
):
    """
    Add a meal to the caller's cart, creating the cart when missing.
    """
    try:
        return CartService(db).add_meal(current_user, entry)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error adding to cart: {error}")
        raise HTTPException(status_code=500, detail="Error adding to cart")


@router.put("/remove", response_model=Dict[str, Any])
async def remove_from_cart(
    entry: CartRemove,
    current_user: UserOutput = Depends(get_current_user),
    db: Database = Depends(get_db)
):
    """
    Remove a meal from the cart; an emptied cart is deleted.
    """
    try:
        return CartService(db).remove_meal(current_user, entry.meal_id)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error removing from cart: {error}")
        raise HTTPException(status_code=500, detail="Error removing from cart")


@router.delete("/me")
async def delete_cart(current_user: UserOutput = Depends(get_current_user), db: Database = Depends(get_db)):
    try:
        return CartService(db).delete_cart(current_user)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error deleting cart: {error}")
        raise HTTPException(status_code=500, detail="Error deleting cart")
