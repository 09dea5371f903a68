# schemas/reports.py
import datetime as dt
from pydantic import BaseModel

# Takings of one calendar day; debit and credit cards share the card bucket
class DailySalesSummary(BaseModel):
    date: dt.date
    total_transactions: int
    total_revenue: float
    cash_sales: float
    card_sales: float
    qris_sales: float
    receivable_sales: float
