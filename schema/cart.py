from pydantic import BaseModel, Field
from typing import Optional


class CartAdd(BaseModel):
    meal_id: str
    restaurant_id: str
    name: Optional[str] = None
    quantity: int = Field(default=1, gt=0)
    unit_price: float = Field(ge=0)

class CartRemove(BaseModel):
    meal_id: str
