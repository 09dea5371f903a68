# backend/models/drug.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, DateTime, Enum, CheckConstraint, func
from sqlalchemy.orm import relationship
from database import Base


# Regulatory class of a drug
class DrugCategory(str, enum.Enum):
    HARD = "hard"
    FREE = "free"
    LIMITED_FREE = "limited_free"
    NARCOTICS_PSYCHOTROPICS = "narcotics_psychotropics"


# Model Drug
# A catalogue entry. Stock is not kept here: it is the sum of the
# drug's batch quantities. Four price tiers are stored as fixed-precision
# decimals.
class Drug(Base):
    __tablename__ = "drugs"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    active_ingredient = Column(String, nullable=False, index=True)
    producer = Column(String, nullable=False)
    category = Column(
        Enum(DrugCategory, name="drug_category", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    unit = Column(String, nullable=False)

    purchase_price = Column(Numeric(10, 2), nullable=False)
    prescription_price = Column(Numeric(10, 2), nullable=False)
    general_price = Column(Numeric(10, 2), nullable=False)
    insurance_price = Column(Numeric(10, 2), nullable=False)

    barcode = Column(String, nullable=True, index=True)
    minimum_stock = Column(Integer, CheckConstraint("minimum_stock >= 0"), nullable=False, default=0)
    storage_location = Column(String, nullable=True)

    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    batches = relationship("Batch", back_populates="drug", order_by="Batch.expiration_date")
