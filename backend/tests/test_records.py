import re
from datetime import date
from decimal import Decimal

import pytest

from models.expense import ExpenseType
from models.purchase_order import PurchaseOrderStatus
from schemas.finance import ExpenseCreate, PurchaseOrderCreate
from schemas.partner import CustomerCreate, SupplierCreate
from schemas.user import UserCreate
from services import finance as finance_service
from services import partners as partner_service
from services import users as user_service
from services.errors import ConstraintViolationError, NotFoundError
from utils.hashing import verify_password


def test_supplier_and_customer_round_trip(db):
    supplier = partner_service.create_supplier(db, SupplierCreate(name="PT Farma", email="sales@farma.id"))
    customer = partner_service.create_customer(db, CustomerCreate(name="Ani", insurance_info="BPJS 0001"))

    assert supplier.id and supplier.created_at
    assert customer.insurance_info == "BPJS 0001"
    assert [s.id for s in partner_service.get_suppliers(db)] == [supplier.id]
    assert [c.id for c in partner_service.get_customers(db)] == [customer.id]


def test_expense_requires_existing_creator(db):
    payload = ExpenseCreate(
        type=ExpenseType.RENT, description="June rent", amount="2500000", expense_date=date(2026, 6, 1), created_by=99
    )
    with pytest.raises(NotFoundError):
        finance_service.create_expense(db, payload)


def test_expenses_filtered_by_date_range(db, cashier):
    for day, amount in ((1, "100"), (15, "200.75"), (30, "300")):
        finance_service.create_expense(db, ExpenseCreate(
            type=ExpenseType.ELECTRICITY, description=f"bill {day}", amount=amount,
            expense_date=date(2026, 6, day), created_by=cashier.id,
        ))

    middle = finance_service.get_expenses(db, date(2026, 6, 10), date(2026, 6, 20))
    assert [e.amount for e in middle] == [Decimal("200.75")]
    assert len(finance_service.get_expenses(db)) == 3


def test_purchase_order_number_and_default_status(db, cashier, supplier):
    po = finance_service.create_purchase_order(db, PurchaseOrderCreate(
        supplier_id=supplier.id, total_amount="1250000", order_date=date(2026, 7, 4), created_by=cashier.id,
    ))

    assert re.fullmatch(r"PO-20260704-[0-9A-F]{6}", po.po_number)
    assert po.status == PurchaseOrderStatus.PENDING
    assert po.total_amount == Decimal("1250000.00")


def test_purchase_order_unknown_supplier(db, cashier):
    with pytest.raises(ConstraintViolationError):
        finance_service.create_purchase_order(db, PurchaseOrderCreate(
            supplier_id=321, total_amount="10", order_date=date(2026, 7, 4), created_by=cashier.id,
        ))


def test_create_user_hashes_password(db):
    user = user_service.create_user(db, UserCreate(username="Apoteker1", full_name="Dewi", password="s3cret!", role="pharmacist"))

    assert user.username == "apoteker1"
    assert user.password_hash != "s3cret!"
    assert verify_password("s3cret!", user.password_hash)
    assert not verify_password("wrong", user.password_hash)


def test_duplicate_username_is_constraint_violation(db):
    user_service.create_user(db, UserCreate(username="kasir2", full_name="A", password="abcdef"))
    with pytest.raises(ConstraintViolationError):
        user_service.create_user(db, UserCreate(username="KASIR2", full_name="B", password="abcdef"))
    assert len(user_service.get_users(db)) == 1
