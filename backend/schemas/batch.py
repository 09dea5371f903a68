# backend/schemas/batch.py
from pydantic import BaseModel, Field, ConfigDict
from decimal import Decimal
from datetime import date, datetime


# Schema for receiving a new batch of a drug
class BatchCreate(BaseModel):
    drug_id: int
    batch_number: str = Field(min_length=1)
    expiration_date: date
    quantity: int = Field(gt=0)
    purchase_price: Decimal = Field(gt=0)
    supplier_id: int
    received_date: date


# Schema for returning batch details
class BatchOut(BaseModel):
    id: int
    drug_id: int
    batch_number: str
    expiration_date: date
    quantity: int
    purchase_price: float
    supplier_id: int
    received_date: date
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
