# routes/reports.py
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from services.reports import get_daily_sales_summary
from schemas.reports import DailySalesSummary

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/daily-sales", response_model=DailySalesSummary)
def report_daily_sales(
    day: Optional[date] = Query(None, alias="date", description="Day to summarise (YYYY-MM-DD), defaults to today"),
    db: Session = Depends(get_db),
):
    return get_daily_sales_summary(db, day or date.today())
