# backend/schemas/transaction.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from decimal import Decimal
from datetime import datetime

from models.transaction import TransactionType, PaymentMethod


# Header of a sale as sent by the till
class TransactionCreate(BaseModel):
    type: TransactionType
    customer_id: Optional[int] = None
    doctor_name: Optional[str] = None
    patient_name: Optional[str] = None
    subtotal: Decimal = Field(gt=0)
    discount_amount: Decimal = Field(default=Decimal("0"), ge=0)
    total_amount: Decimal = Field(gt=0)
    payment_method: PaymentMethod
    cashier_id: int


class TransactionOut(BaseModel):
    id: int
    transaction_number: str
    type: TransactionType
    customer_id: Optional[int] = None
    doctor_name: Optional[str] = None
    patient_name: Optional[str] = None
    subtotal: float
    discount_amount: float
    total_amount: float
    payment_method: PaymentMethod
    cashier_id: int
    transaction_date: datetime
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# One line item recorded against a specific batch
class TransactionItemCreate(BaseModel):
    transaction_id: int
    drug_id: int
    batch_id: int
    quantity: int = Field(gt=0)
    unit_price: Decimal = Field(gt=0)
    discount_amount: Decimal = Field(default=Decimal("0"), ge=0)
    subtotal: Decimal = Field(gt=0)


class TransactionItemOut(BaseModel):
    id: int
    transaction_id: int
    drug_id: int
    batch_id: int
    quantity: int
    unit_price: float
    discount_amount: float
    subtotal: float
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# Sale header together with its line items
class TransactionDetail(TransactionOut):
    items: List[TransactionItemOut]


# A cart line; without batch_id the stock is taken first-expiring-first-out
class CheckoutLine(BaseModel):
    drug_id: int
    quantity: int = Field(gt=0)
    discount_amount: Decimal = Field(default=Decimal("0"), ge=0)
    batch_id: Optional[int] = None


# Whole cart submitted at the till in one request
class CheckoutRequest(BaseModel):
    type: TransactionType = TransactionType.NON_PRESCRIPTION
    customer_id: Optional[int] = None
    doctor_name: Optional[str] = None
    patient_name: Optional[str] = None
    payment_method: PaymentMethod = PaymentMethod.CASH
    cashier_id: int
    discount_amount: Decimal = Field(default=Decimal("0"), ge=0)
    items: List[CheckoutLine] = Field(min_length=1)
