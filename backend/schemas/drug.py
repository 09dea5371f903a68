# backend/schemas/drug.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from decimal import Decimal
from datetime import datetime

from models.drug import DrugCategory


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Shared descriptive attributes of a drug
class DrugBase(ORMBase):
    name: str = Field(min_length=1)
    active_ingredient: str
    producer: str
    category: DrugCategory
    unit: str
    barcode: Optional[str] = None
    minimum_stock: int = Field(default=0, ge=0)
    storage_location: Optional[str] = None


# Schema for registering a new drug; every price tier must be positive
class DrugCreate(DrugBase):
    purchase_price: Decimal = Field(gt=0)
    prescription_price: Decimal = Field(gt=0)
    general_price: Decimal = Field(gt=0)
    insurance_price: Decimal = Field(gt=0)


# Full drug representation; prices leave the API as plain numbers
class DrugOut(DrugBase):
    id: int
    purchase_price: float
    prescription_price: float
    general_price: float
    insurance_price: float
    created_at: datetime
    updated_at: datetime
