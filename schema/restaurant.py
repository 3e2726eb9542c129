from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any


class RestaurantCreate(BaseModel):
    name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    description: Optional[str] = None
    image: Optional[str] = None
    menu: List[str] = []

class RestaurantUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    address: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    image: Optional[str] = None
    menu: Optional[List[str]] = None

class RestaurantStatistics(BaseModel):
    totalOrders: int
    totalRevenue: float
    ordersByState: Dict[str, int]
    topMeals: List[List[Any]]
    ordersTrend: Dict[str, int]
