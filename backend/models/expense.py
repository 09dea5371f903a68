import enum
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from database import Base


class ExpenseType(str, enum.Enum):
    SALARY = "salary"
    ELECTRICITY = "electricity"
    RENT = "rent"
    OTHER_OPERATIONAL = "other_operational"


# Operating cost booked by a staff member
class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(
        Enum(ExpenseType, name="expense_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    description = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    expense_date = Column(Date, nullable=False, index=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    creator = relationship("User")
