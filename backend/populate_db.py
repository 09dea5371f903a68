import os
import random
import sys
from datetime import date, timedelta

import pandas as pd

# Add 'backend' folder to Python path
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

# Database models and setup
from database import SessionLocal, init_db
from models.batch import Batch
from models.drug import Drug, DrugCategory
from models.supplier import Supplier
from models.users import User
from utils.hashing import get_password_hash
from utils.money import to_money

# Configuration
DATA_DIR = os.path.join(os.path.dirname(__file__), "data_source")
DRUGS_CSV = os.path.join(DATA_DIR, "drugs.csv")
BATCHES_PER_DRUG = 3
DEMO_CASHIER = {"username": "kasir", "full_name": "Demo Cashier", "password": "kasir123", "role": "cashier"}
PRICE_COLUMNS = ["purchase_price", "prescription_price", "general_price", "insurance_price"]
# End Configuration


def load_drug_catalogue(path: str = DRUGS_CSV) -> pd.DataFrame:
    """Reads the demo catalogue and normalises prices, categories and optional text columns."""
    df = pd.read_csv(path, dtype={"barcode": str})
    df = df.dropna(subset=["name", "active_ingredient", "category"])

    # Unknown categories would fail the enum column
    valid = {c.value for c in DrugCategory}
    df = df[df["category"].isin(valid)].copy()

    for col in PRICE_COLUMNS:
        df[col] = df[col].astype(str).map(to_money)
    df["category"] = df["category"].map(DrugCategory)
    df["minimum_stock"] = df["minimum_stock"].fillna(0).astype(int)
    df = df.astype(object).where(pd.notna(df), None)
    return df


def _ensure_cashier(session) -> User:
    cashier = session.query(User).filter(User.username == DEMO_CASHIER["username"]).first()
    if cashier:
        return cashier
    cashier = User(
        username=DEMO_CASHIER["username"],
        full_name=DEMO_CASHIER["full_name"],
        password_hash=get_password_hash(DEMO_CASHIER["password"]),
        role=DEMO_CASHIER["role"],
        is_active=True,
    )
    session.add(cashier)
    session.flush()
    return cashier


def populate_database(seed: int = 42) -> None:
    """Rebuilds the demo catalogue and stock. Meant for a fresh database: existing sales pin their drugs and batches."""
    rng = random.Random(seed)
    init_db()
    session = SessionLocal()
    try:
        # Catalogue and stock are rebuilt, users are preserved
        session.query(Batch).delete()
        session.query(Drug).delete()

        _ensure_cashier(session)

        supplier = session.query(Supplier).filter(Supplier.name == "PT Demo Distribusi").first()
        if supplier is None:
            supplier = Supplier(name="PT Demo Distribusi", contact_person="Budi", phone="021-5550101")
            session.add(supplier)
            session.flush()

        catalogue = load_drug_catalogue()
        today = date.today()
        batch_count = 0

        for row in catalogue.to_dict(orient="records"):
            drug = Drug(**row)
            session.add(drug)
            session.flush()

            for n in range(BATCHES_PER_DRUG):
                # Spread expiries from a few weeks to two years out
                expires = today + timedelta(days=rng.randint(20, 730))
                session.add(Batch(
                    drug_id=drug.id,
                    batch_number=f"{drug.barcode or drug.id}-{n + 1:02d}",
                    expiration_date=expires,
                    quantity=rng.randint(0, 150),
                    purchase_price=drug.purchase_price,
                    supplier_id=supplier.id,
                    received_date=today - timedelta(days=rng.randint(1, 90)),
                ))
                batch_count += 1

        session.commit()
        print(f"Inserted {len(catalogue)} drugs and {batch_count} batches.")
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


if __name__ == "__main__":
    populate_database()
