# backend/models/transaction.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from database import Base


class TransactionType(str, enum.Enum):
    PRESCRIPTION = "prescription"
    NON_PRESCRIPTION = "non_prescription"


class PaymentMethod(str, enum.Enum):
    CASH = "cash"
    DEBIT_CARD = "debit_card"
    CREDIT_CARD = "credit_card"
    QRIS = "qris"
    RECEIVABLE = "receivable"


def _values(enum_cls):
    return [m.value for m in enum_cls]


# One completed sale at the till
class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    transaction_number = Column(String, unique=True, nullable=False, index=True)
    type = Column(Enum(TransactionType, name="transaction_type", values_callable=_values), nullable=False)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True)

    # Prescription sales only
    doctor_name = Column(String, nullable=True)
    patient_name = Column(String, nullable=True)

    subtotal = Column(Numeric(10, 2), nullable=False)
    discount_amount = Column(Numeric(10, 2), nullable=False, default=0)
    total_amount = Column(Numeric(10, 2), nullable=False)
    payment_method = Column(Enum(PaymentMethod, name="payment_method", values_callable=_values), nullable=False)
    cashier_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    # Local wall-clock time of the sale, used for daily summaries
    transaction_date = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    customer = relationship("Customer")
    cashier = relationship("User", back_populates="transactions")
    items = relationship("TransactionItem", back_populates="transaction", order_by="TransactionItem.id")


# One drug-and-batch line of a sale
class TransactionItem(Base):
    __tablename__ = "transaction_items"

    id = Column(Integer, primary_key=True, index=True)
    transaction_id = Column(Integer, ForeignKey("transactions.id"), index=True, nullable=False)
    drug_id = Column(Integer, ForeignKey("drugs.id"), nullable=False)
    batch_id = Column(Integer, ForeignKey("batches.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    discount_amount = Column(Numeric(10, 2), nullable=False, default=0)
    subtotal = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    transaction = relationship("Transaction", back_populates="items")
    drug = relationship("Drug")
    batch = relationship("Batch")
