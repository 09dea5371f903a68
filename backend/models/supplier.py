# backend/models/supplier.py
from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from database import Base


# Wholesaler delivering drug batches; only the name is mandatory
class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    contact_person = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    address = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    batches = relationship("Batch", back_populates="supplier")
    purchase_orders = relationship("PurchaseOrder", back_populates="supplier")
