import os
from datetime import date, timedelta
from decimal import Decimal

# Point the app at an in-memory database before config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from config import settings
from database import Base, SessionLocal, engine, get_db
from models.batch import Batch
from models.customer import Customer
from models.drug import Drug, DrugCategory
from models.supplier import Supplier
from models.users import User
from utils.hashing import get_password_hash


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db, tmp_path, monkeypatch):
    from main import app

    monkeypatch.setattr(settings, "RECEIPT_DIR", str(tmp_path / "receipts"))

    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def cashier(db):
    user = User(
        username="kasir1",
        full_name="Siti Kasir",
        password_hash=get_password_hash("rahasia"),
        role="cashier",
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture()
def supplier(db):
    s = Supplier(name="PT Sehat Distribusi", phone="021-555")
    db.add(s)
    db.commit()
    db.refresh(s)
    return s


@pytest.fixture()
def customer(db):
    c = Customer(name="Budi", phone="0812")
    db.add(c)
    db.commit()
    db.refresh(c)
    return c


@pytest.fixture()
def make_drug(db):
    def _make(name="Paracetamol 500 mg", minimum_stock=0, **overrides):
        fields = dict(
            name=name,
            active_ingredient="Paracetamol",
            producer="Kimia Farma",
            category=DrugCategory.FREE,
            unit="tablet",
            purchase_price=Decimal("300.00"),
            prescription_price=Decimal("550.00"),
            general_price=Decimal("500.00"),
            insurance_price=Decimal("450.00"),
            minimum_stock=minimum_stock,
        )
        fields.update(overrides)
        drug = Drug(**fields)
        db.add(drug)
        db.commit()
        db.refresh(drug)
        return drug
    return _make


@pytest.fixture()
def make_batch(db, supplier):
    counter = {"n": 0}

    def _make(drug, quantity=10, expiration_date=None, **overrides):
        counter["n"] += 1
        fields = dict(
            drug_id=drug.id,
            batch_number=f"B-{counter['n']:03d}",
            expiration_date=expiration_date or date.today() + timedelta(days=365),
            quantity=quantity,
            purchase_price=Decimal("300.00"),
            supplier_id=supplier.id,
            received_date=date.today(),
        )
        fields.update(overrides)
        batch = Batch(**fields)
        db.add(batch)
        db.commit()
        db.refresh(batch)
        return batch
    return _make
