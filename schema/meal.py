from pydantic import BaseModel, Field, model_validator
from typing import Optional, List


class MealCreate(BaseModel):
    name: str = Field(min_length=1)
    category: Optional[str] = None
    area: Optional[str] = None
    instructions: Optional[str] = None
    thumbnail: Optional[str] = None
    ingredients: List[str] = Field(min_length=1)
    measures: List[str]
    price: float = Field(ge=0)
    preparation_time: float = Field(ge=0)

    @model_validator(mode="after")
    def check_measures(self):
        if len(self.measures) != len(self.ingredients):
            raise ValueError("measures must have the same length as ingredients")
        return self

class MealUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = None
    area: Optional[str] = None
    instructions: Optional[str] = None
    thumbnail: Optional[str] = None
    ingredients: Optional[List[str]] = Field(default=None, min_length=1)
    measures: Optional[List[str]] = Field(default=None, min_length=1)
    price: Optional[float] = Field(default=None, ge=0)
    preparation_time: Optional[float] = Field(default=None, ge=0)
