from datetime import date, datetime
from decimal import Decimal

from models.transaction import PaymentMethod, TransactionType
from schemas.transaction import TransactionCreate
from services import transactions as txn_service
from services.reports import get_daily_sales_summary


def _sale(db, cashier, amount, method, when):
    payload = TransactionCreate(
        type=TransactionType.NON_PRESCRIPTION,
        subtotal=Decimal(amount),
        total_amount=Decimal(amount),
        payment_method=method,
        cashier_id=cashier.id,
    )
    return txn_service.create_transaction(db, payload, now=when)


def test_empty_day_is_all_zero(db):
    summary = get_daily_sales_summary(db, date(2026, 1, 1))

    assert summary.date == date(2026, 1, 1)
    assert summary.total_transactions == 0
    assert summary.total_revenue == 0
    assert summary.cash_sales == 0
    assert summary.card_sales == 0
    assert summary.qris_sales == 0
    assert summary.receivable_sales == 0


def test_card_bucket_merges_debit_and_credit(db, cashier):
    day = datetime(2026, 4, 10, 9, 0)
    _sale(db, cashier, "100.50", PaymentMethod.CASH, day)
    _sale(db, cashier, "200.25", PaymentMethod.DEBIT_CARD, day)
    _sale(db, cashier, "300.25", PaymentMethod.CREDIT_CARD, day)
    _sale(db, cashier, "40.00", PaymentMethod.QRIS, day)
    _sale(db, cashier, "59.00", PaymentMethod.RECEIVABLE, day)

    summary = get_daily_sales_summary(db, day.date())

    assert summary.total_transactions == 5
    assert summary.cash_sales == 100.50
    assert summary.card_sales == 500.50
    assert summary.qris_sales == 40.00
    assert summary.receivable_sales == 59.00
    assert summary.total_revenue == 700.00
    buckets = summary.cash_sales + summary.card_sales + summary.qris_sales + summary.receivable_sales
    assert round(buckets, 2) == summary.total_revenue


def test_day_boundaries_are_half_open(db, cashier):
    _sale(db, cashier, "10", PaymentMethod.CASH, datetime(2026, 4, 9, 23, 59, 59))
    _sale(db, cashier, "20", PaymentMethod.CASH, datetime(2026, 4, 10, 0, 0, 0))
    _sale(db, cashier, "30", PaymentMethod.CASH, datetime(2026, 4, 10, 23, 59, 59))
    _sale(db, cashier, "40", PaymentMethod.CASH, datetime(2026, 4, 11, 0, 0, 0))

    summary = get_daily_sales_summary(db, date(2026, 4, 10))

    assert summary.total_transactions == 2
    assert summary.cash_sales == 50.0
