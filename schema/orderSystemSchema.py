from pydantic import BaseModel, Field
from typing import Optional, List


class OrderMealIn(BaseModel):
    meal_id: str
    name: Optional[str] = None
    quantity: int
    unit_price: float
    preparation_time: Optional[float] = None
    restaurant_id: Optional[str] = None

class OrderCreate(BaseModel):
    meals: List[OrderMealIn] = []
    delivery_method: str = Field(min_length=1)

class OrderItem(BaseModel):
    meal_id: str
    name: Optional[str] = None
    quantity: int
    unit_price: float
    preparation_time: float

class Order(BaseModel):
    id: str
    customer_id: str
    customer_name: Optional[str] = None
    restaurant_id: str
    restaurant_name: Optional[str] = None
    meals: List[OrderItem] = []
    total: float
    status: str
    order_date: str
    delivery_method: str
    wait_time: float

class OrderStatusUpdate(BaseModel):
    message: str
    status: str
