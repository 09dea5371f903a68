from datetime import date, timedelta
from decimal import Decimal

import pytest
from dateutil.relativedelta import relativedelta

from schemas.batch import BatchCreate
from services import batches as batch_service
from services.errors import ConstraintViolationError


def test_create_batch_reads_back_typed_values(db, make_drug, supplier):
    drug = make_drug()
    payload = BatchCreate(
        drug_id=drug.id,
        batch_number="LOT-7",
        expiration_date="2027-03-31",
        quantity=40,
        purchase_price="312.40",
        supplier_id=supplier.id,
        received_date="2026-01-05",
    )
    created = batch_service.create_batch(db, payload)
    db.expire_all()

    batch = batch_service.get_batch_by_id(db, created.id)
    assert batch.purchase_price == Decimal("312.40")
    assert isinstance(batch.purchase_price, Decimal)
    assert batch.expiration_date == date(2027, 3, 31)
    assert batch.received_date == date(2026, 1, 5)
    assert batch.quantity == 40


def test_create_batch_unknown_drug_is_constraint_violation(db, supplier):
    payload = BatchCreate(
        drug_id=4242,
        batch_number="LOT-X",
        expiration_date=date(2027, 1, 1),
        quantity=5,
        purchase_price=Decimal("10"),
        supplier_id=supplier.id,
        received_date=date(2026, 1, 1),
    )
    with pytest.raises(ConstraintViolationError):
        batch_service.create_batch(db, payload)


def test_get_batch_by_id_missing_returns_none(db):
    assert batch_service.get_batch_by_id(db, 12345) is None


def test_batches_by_drug_sorted_by_expiration(db, make_drug, make_batch):
    drug = make_drug()
    other = make_drug(name="Other")
    today = date.today()
    for days in (300, 30, 700, 90):
        make_batch(drug, expiration_date=today + timedelta(days=days))
    make_batch(other, expiration_date=today + timedelta(days=1))

    batches = batch_service.get_batches_by_drug(db, drug.id)
    expiries = [b.expiration_date for b in batches]
    assert len(batches) == 4
    assert expiries == sorted(expiries)


def test_expiring_window_boundaries(db, make_drug, make_batch):
    drug = make_drug()
    today = date(2026, 8, 31)
    horizon = today + relativedelta(months=6)

    expires_today = make_batch(drug, expiration_date=today)
    expired = make_batch(drug, expiration_date=today - timedelta(days=1))
    at_horizon = make_batch(drug, expiration_date=horizon)
    past_horizon = make_batch(drug, expiration_date=horizon + timedelta(days=1))

    ids = [b.id for b in batch_service.get_expiring_batches(db, 6, today=today)]
    assert expires_today.id in ids
    assert at_horizon.id in ids
    assert expired.id not in ids
    assert past_horizon.id not in ids


def test_expiring_month_end_is_clamped():
    start, end = batch_service.expiry_window(6, today=date(2026, 8, 31))
    assert start == date(2026, 8, 31)
    assert end == date(2027, 2, 28)


def test_expiring_zero_months_only_today(db, make_drug, make_batch):
    drug = make_drug()
    today = date(2026, 5, 1)
    same_day = make_batch(drug, expiration_date=today)
    make_batch(drug, expiration_date=today + timedelta(days=1))

    assert [b.id for b in batch_service.get_expiring_batches(db, 0, today=today)] == [same_day.id]


def test_expiring_negative_window_rejected(db):
    with pytest.raises(ValueError):
        batch_service.get_expiring_batches(db, -1)
