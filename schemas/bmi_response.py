# schemas/bmi_response.py
from typing import List, Optional

from pydantic import BaseModel


class BMIResponse(BaseModel):
    bmi: float
    category: str


class ErrorResponse(BaseModel):
    error: str


class CategoryRange(BaseModel):
    category: str
    min: Optional[float] = None
    max: Optional[float] = None


class CategoryRangesResponse(BaseModel):
    categories: List[CategoryRange]
