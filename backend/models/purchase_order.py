# backend/models/purchase_order.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from database import Base

# Lifecycle states of a purchase order
class PurchaseOrderStatus(str, enum.Enum):
    PENDING = "pending"
    RECEIVED = "received"
    CANCELLED = "cancelled"

# Order placed with a supplier
class PurchaseOrder(Base):
    __tablename__ = "purchase_orders"

    id = Column(Integer, primary_key=True, index=True)
    po_number = Column(String, unique=True, nullable=False, index=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=False)
    status = Column(
        Enum(PurchaseOrderStatus, name="po_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=PurchaseOrderStatus.PENDING,
    )
    total_amount = Column(Numeric(10, 2), nullable=False)
    order_date = Column(Date, nullable=False)
    expected_delivery = Column(Date, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    supplier = relationship("Supplier", back_populates="purchase_orders")
    creator = relationship("User")
