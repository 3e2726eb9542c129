from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Dict, Any, Optional
from pymongo.database import Database
import logging

from configurations.config import get_db
from routes.security.decorators import authorize
from routes.service.restaurantService import RestaurantService
from schema.restaurant import RestaurantCreate, RestaurantUpdate, RestaurantStatistics
from schema.user import UserOutput, RESTAURANT_OWNER

router = APIRouter()
logger = logging.getLogger(__name__)

owner_only = authorize([RESTAURANT_OWNER], "Access reserved to restaurant owners")


@router.get("/search", response_model=Dict[str, Any])
async def search_restaurants(
    q: Optional[str] = Query(None, description="Text to look for in the name"),
    address: Optional[str] = Query(None, description="Text to look for in the address"),
    db: Database = Depends(get_db)
):
    try:
        return RestaurantService(db).search(q, address)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error searching restaurants: {error}")
        raise HTTPException(status_code=500, detail="Error searching restaurants")


@router.get("", response_model=List[Dict[str, Any]])
async def get_restaurants(db: Database = Depends(get_db)):
    try:
        return RestaurantService(db).list_restaurants()
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error retrieving restaurants: {error}")
        raise HTTPException(status_code=500, detail="Error retrieving restaurants")


@router.get("/statistics", response_model=RestaurantStatistics)
async def get_statistics(
    current_user: UserOutput = Depends(owner_only),
    db: Database = Depends(get_db)
):
    """
    Order statistics of the caller's restaurant, recomputed on every call.
    """
    try:
        return RestaurantService(db).statistics(current_user)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error retrieving statistics: {error}")
        raise HTTPException(status_code=500, detail="Error retrieving statistics")


@router.get("/{restaurant_id}", response_model=Dict[str, Any])
async def get_restaurant(restaurant_id: str, db: Database = Depends(get_db)):
    """
    Restaurant details with its menu resolved to meals.
    """
    try:
        return RestaurantService(db).get_restaurant(restaurant_id)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error retrieving restaurant {restaurant_id}: {error}")
        raise HTTPException(status_code=500, detail="Error retrieving restaurant")


@router.post("", status_code=201, response_model=Dict[str, Any])
async def create_restaurant(
    details: RestaurantCreate,
    current_user: UserOutput = Depends(owner_only),
    db: Database = Depends(get_db)
):
    try:
        return RestaurantService(db).create_restaurant(current_user, details)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error creating restaurant: {error}")
        raise HTTPException(status_code=500, detail="Error creating restaurant")


@router.put("/{restaurant_id}", response_model=Dict[str, Any])
async def update_restaurant(
    restaurant_id: str,
    details: RestaurantUpdate,
    current_user: UserOutput = Depends(owner_only),
    db: Database = Depends(get_db)
):
    try:
        return RestaurantService(db).update_restaurant(current_user, restaurant_id, details)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error updating restaurant {restaurant_id}: {error}")
        raise HTTPException(status_code=500, detail="Error updating restaurant")


@router.delete("/{restaurant_id}")
async def delete_restaurant(
    restaurant_id: str,
    current_user: UserOutput = Depends(owner_only),
    db: Database = Depends(get_db)
):
    """
    Delete the restaurant with its meals and open orders.
    """
    try:
        return RestaurantService(db).delete_restaurant(current_user, restaurant_id)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error deleting restaurant {restaurant_id}: {error}")
        raise HTTPException(status_code=500, detail="Error deleting restaurant")
