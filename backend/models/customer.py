from sqlalchemy import Column, Integer, String, DateTime, func
from database import Base


# Customer record used for receivables and insured sales
class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    address = Column(String, nullable=True)
    insurance_info = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
