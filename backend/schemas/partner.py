# backend/schemas/partner.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

# Request schema for registering a supplier
class SupplierCreate(BaseModel):
    name: str = Field(min_length=1)
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None

# Response schema for a supplier
class SupplierOut(SupplierCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True

# Request schema for registering a customer
class CustomerCreate(BaseModel):
    name: str = Field(min_length=1)
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    insurance_info: Optional[str] = None

# Response schema for a customer
class CustomerOut(CustomerCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
