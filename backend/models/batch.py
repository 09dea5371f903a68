# backend/models/batch.py
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, ForeignKey, CheckConstraint, func
from sqlalchemy.orm import relationship
from database import Base

# A received lot of a drug with its own expiry date, quantity and cost
class Batch(Base):
    __tablename__ = "batches"

    id = Column(Integer, primary_key=True, index=True)
    drug_id = Column(Integer, ForeignKey("drugs.id"), index=True, nullable=False)
    batch_number = Column(String, nullable=False)
    expiration_date = Column(Date, nullable=False, index=True)

    # Decremented on every sale, never below zero
    quantity = Column(Integer, CheckConstraint("quantity >= 0", name="ck_batches_quantity_non_negative"), nullable=False)

    purchase_price = Column(Numeric(10, 2), nullable=False)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), index=True, nullable=False)
    received_date = Column(Date, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    drug = relationship("Drug", back_populates="batches")
    supplier = relationship("Supplier", back_populates="batches")
