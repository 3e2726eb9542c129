from fastapi import APIRouter, Depends, HTTPException, Query, Response
from typing import List, Dict, Any, Optional
from pymongo.database import Database
import logging

from configurations.config import get_db
from routes.security.decorators import authorize
from routes.service.mealService import MealService
from schema.meal import MealCreate, MealUpdate
from schema.user import UserOutput, RESTAURANT_OWNER

router = APIRouter()
logger = logging.getLogger(__name__)

owner_only = authorize([RESTAURANT_OWNER], "Access reserved to restaurant owners")


@router.get("", response_model=List[Dict[str, Any]])
async def get_meals(
    category: Optional[str] = Query(None),
    area: Optional[str] = Query(None),
    name: Optional[str] = Query(None, description="Case-insensitive match on the meal name"),
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    restaurant_id: Optional[str] = Query(None),
    db: Database = Depends(get_db)
):
    filters = {
        "category": category,
        "area": area,
        "name": name,
        "min_price": min_price,
        "max_price": max_price,
        "restaurant_id": restaurant_id
    }
    try:
        return MealService(db).list_meals(filters)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error retrieving meals: {error}")
        raise HTTPException(status_code=500, detail="Error retrieving meals")


@router.get("/{meal_id}", response_model=Dict[str, Any])
async def get_meal(meal_id: str, db: Database = Depends(get_db)):
    try:
        return MealService(db).get_meal(meal_id)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error retrieving meal {meal_id}: {error}")
        raise HTTPException(status_code=500, detail="Error retrieving meal")


@router.post("", status_code=201, response_model=Dict[str, Any])
async def create_meal(
    details: MealCreate,
    current_user: UserOutput = Depends(owner_only),
    db: Database = Depends(get_db)
):
    """
    Add a meal to the caller's restaurant menu.
    """
    try:
        return MealService(db).create_meal(current_user, details)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error creating meal: {error}")
        raise HTTPException(status_code=500, detail="Error creating meal")


@router.put("/{meal_id}", response_model=Dict[str, Any])
async def update_meal(
    meal_id: str,
    details: MealUpdate,
    current_user: UserOutput = Depends(owner_only),
    db: Database = Depends(get_db)
):
    try:
        return MealService(db).update_meal(current_user, meal_id, details)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error updating meal {meal_id}: {error}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.delete("/{meal_id}", status_code=204)
async def delete_meal(
    meal_id: str,
    current_user: UserOutput = Depends(owner_only),
    db: Database = Depends(get_db)
):
    try:
        MealService(db).delete_meal(current_user, meal_id)
        return Response(status_code=204)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error deleting meal {meal_id}: {error}")
        raise HTTPException(status_code=500, detail="Error deleting meal")
