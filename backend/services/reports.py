# backend/services/reports.py
import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session

from models.transaction import PaymentMethod, Transaction
from schemas.reports import DailySalesSummary
from utils.dates import day_bounds
from utils.money import to_money

logger = logging.getLogger(__name__)

# Payment methods counted in each bucket of the summary
CARD_METHODS = (PaymentMethod.DEBIT_CARD, PaymentMethod.CREDIT_CARD)


def get_daily_sales_summary(db: Session, day: date) -> DailySalesSummary:
    """
    Aggregates the takings of one calendar day.

    Transactions count when their transaction_date falls in [day 00:00, next day 00:00).
    Debit and credit card payments are reported together as card sales.
    A day without sales yields an all-zero summary.
    """
    start, end = day_bounds(day)

    rows = (
        db.query(
            Transaction.payment_method,
            func.count(Transaction.id),
            func.coalesce(func.sum(Transaction.total_amount), 0),
        )
        .filter(Transaction.transaction_date >= start, Transaction.transaction_date < end)
        .group_by(Transaction.payment_method)
        .all()
    )

    totals = {method: Decimal("0") for method in PaymentMethod}
    count = 0
    for method, n, amount in rows:
        totals[PaymentMethod(method)] += to_money(amount)
        count += n

    card = sum((totals[m] for m in CARD_METHODS), Decimal("0"))
    revenue = sum(totals.values(), Decimal("0"))

    logger.debug("Daily summary for %s: %d transactions, revenue %s", day, count, revenue)
    return DailySalesSummary(
        date=day,
        total_transactions=count,
        total_revenue=float(to_money(revenue)),
        cash_sales=float(to_money(totals[PaymentMethod.CASH])),
        card_sales=float(to_money(card)),
        qris_sales=float(to_money(totals[PaymentMethod.QRIS])),
        receivable_sales=float(to_money(totals[PaymentMethod.RECEIVABLE])),
    )
