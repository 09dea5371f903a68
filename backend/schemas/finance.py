from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from decimal import Decimal
from datetime import date, datetime

from models.expense import ExpenseType
from models.purchase_order import PurchaseOrderStatus

# Input schema for booking an operating expense
class ExpenseCreate(BaseModel):
    type: ExpenseType
    description: str = Field(min_length=1)
    amount: Decimal = Field(gt=0)
    expense_date: date
    created_by: int

class ExpenseOut(BaseModel):
    id: int
    type: ExpenseType
    description: str
    amount: float
    expense_date: date
    created_by: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

# Input schema for a purchase order; the PO number is generated server-side
class PurchaseOrderCreate(BaseModel):
    supplier_id: int
    total_amount: Decimal = Field(gt=0)
    order_date: date
    expected_delivery: Optional[date] = None
    created_by: int

class PurchaseOrderOut(BaseModel):
    id: int
    po_number: str
    supplier_id: int
    status: PurchaseOrderStatus
    total_amount: float
    order_date: date
    expected_delivery: Optional[date] = None
    created_by: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
