from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from models.batch import Batch
from models.transaction import PaymentMethod, Transaction, TransactionItem, TransactionType
from schemas.transaction import CheckoutRequest
from services import transactions as txn_service
from services.errors import InsufficientStockError, NotFoundError, PharmacyError

NOW = datetime(2026, 6, 15, 10, 30)
TODAY = NOW.date()


def _cart(cashier_id, items, **overrides):
    data = dict(cashier_id=cashier_id, items=items)
    data.update(overrides)
    return CheckoutRequest(**data)


def _quantities(db, *batches):
    db.expire_all()
    return [db.get(Batch, b.id).quantity for b in batches]


def test_checkout_uses_general_price_and_computes_totals(db, cashier, make_drug, make_batch):
    drug = make_drug()
    batch = make_batch(drug, quantity=20, expiration_date=TODAY + timedelta(days=200))

    txn = txn_service.checkout(
        db,
        _cart(cashier.id, [{"drug_id": drug.id, "quantity": 3, "discount_amount": "100"}], discount_amount="50"),
        now=NOW,
    )

    assert txn.subtotal == Decimal("1500.00")
    assert txn.discount_amount == Decimal("150.00")
    assert txn.total_amount == Decimal("1350.00")
    assert txn.transaction_date == NOW
    assert len(txn.items) == 1
    assert txn.items[0].unit_price == Decimal("500.00")
    assert txn.items[0].subtotal == Decimal("1400.00")
    assert _quantities(db, batch) == [17]


def test_prescription_checkout_uses_prescription_price(db, cashier, make_drug, make_batch):
    drug = make_drug()
    make_batch(drug, quantity=5, expiration_date=TODAY + timedelta(days=200))

    txn = txn_service.checkout(
        db,
        _cart(
            cashier.id, [{"drug_id": drug.id, "quantity": 2}],
            type=TransactionType.PRESCRIPTION, doctor_name="dr. Andi", patient_name="Rina",
            payment_method=PaymentMethod.QRIS,
        ),
        now=NOW,
    )

    assert txn.items[0].unit_price == Decimal("550.00")
    assert txn.total_amount == Decimal("1100.00")
    assert txn.doctor_name == "dr. Andi"


def test_checkout_consumes_earliest_expiry_first(db, cashier, make_drug, make_batch):
    drug = make_drug()
    later = make_batch(drug, quantity=10, expiration_date=TODAY + timedelta(days=300))
    sooner = make_batch(drug, quantity=4, expiration_date=TODAY + timedelta(days=40))
    expired = make_batch(drug, quantity=50, expiration_date=TODAY - timedelta(days=1))

    txn = txn_service.checkout(db, _cart(cashier.id, [{"drug_id": drug.id, "quantity": 6}]), now=NOW)

    assert [(i.batch_id, i.quantity) for i in txn.items] == [(sooner.id, 4), (later.id, 2)]
    assert _quantities(db, sooner, later, expired) == [0, 8, 50]


def test_checkout_exceeding_stock_rolls_back_everything(db, cashier, make_drug, make_batch):
    first = make_drug(name="First")
    second = make_drug(name="Second")
    b1 = make_batch(first, quantity=10, expiration_date=TODAY + timedelta(days=100))
    b2 = make_batch(second, quantity=2, expiration_date=TODAY + timedelta(days=100))

    with pytest.raises(InsufficientStockError):
        txn_service.checkout(
            db,
            _cart(cashier.id, [
                {"drug_id": first.id, "quantity": 5},
                {"drug_id": second.id, "quantity": 3},
            ]),
            now=NOW,
        )

    assert db.query(Transaction).count() == 0
    assert db.query(TransactionItem).count() == 0
    assert _quantities(db, b1, b2) == [10, 2]


def test_checkout_with_explicit_batch(db, cashier, make_drug, make_batch):
    drug = make_drug()
    sooner = make_batch(drug, quantity=10, expiration_date=TODAY + timedelta(days=30))
    chosen = make_batch(drug, quantity=10, expiration_date=TODAY + timedelta(days=300))

    txn = txn_service.checkout(
        db, _cart(cashier.id, [{"drug_id": drug.id, "quantity": 2, "batch_id": chosen.id}]), now=NOW
    )

    assert txn.items[0].batch_id == chosen.id
    assert _quantities(db, sooner, chosen) == [10, 8]


def test_checkout_unknown_drug(db, cashier):
    with pytest.raises(NotFoundError):
        txn_service.checkout(db, _cart(cashier.id, [{"drug_id": 999, "quantity": 1}]), now=NOW)


def test_checkout_discount_not_below_line_amount(db, cashier, make_drug, make_batch):
    drug = make_drug()
    batch = make_batch(drug, quantity=5, expiration_date=TODAY + timedelta(days=100))

    with pytest.raises(PharmacyError):
        txn_service.checkout(
            db, _cart(cashier.id, [{"drug_id": drug.id, "quantity": 1, "discount_amount": "500"}]), now=NOW
        )
    assert _quantities(db, batch) == [5]


def test_allocate_fefo_reports_sellable_stock(db, make_drug, make_batch):
    drug = make_drug()
    make_batch(drug, quantity=3, expiration_date=TODAY + timedelta(days=10))
    make_batch(drug, quantity=9, expiration_date=TODAY - timedelta(days=10))

    with pytest.raises(InsufficientStockError, match="available 3"):
        txn_service.allocate_fefo(db, drug, 5, today=TODAY)


def test_checkout_rejects_empty_cart():
    with pytest.raises(ValueError):
        CheckoutRequest(cashier_id=1, items=[])
