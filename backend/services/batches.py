# backend/services/batches.py
import logging
from datetime import date
from typing import List, Optional

from dateutil.relativedelta import relativedelta
from sqlalchemy.orm import Session

from models.batch import Batch
from schemas.batch import BatchCreate
from services.common import commit_or_raise
from utils.money import to_money

logger = logging.getLogger(__name__)


def create_batch(db: Session, payload: BatchCreate) -> Batch:
    # Unknown drug or supplier ids are rejected by the foreign keys on commit
    batch = Batch(
        drug_id=payload.drug_id,
        batch_number=payload.batch_number,
        expiration_date=payload.expiration_date,
        quantity=payload.quantity,
        purchase_price=to_money(payload.purchase_price),
        supplier_id=payload.supplier_id,
        received_date=payload.received_date,
    )
    db.add(batch)
    commit_or_raise(db, "Batch")
    db.refresh(batch)
    logger.info("Batch %s received for drug %s: %s units", batch.batch_number, batch.drug_id, batch.quantity)
    return batch


def get_batches_by_drug(db: Session, drug_id: int) -> List[Batch]:
    # Earliest expiry first, the order stock should leave the shelf
    return (
        db.query(Batch)
        .filter(Batch.drug_id == drug_id)
        .order_by(Batch.expiration_date.asc(), Batch.id.asc())
        .all()
    )


def get_batch_by_id(db: Session, batch_id: int) -> Optional[Batch]:
    return db.get(Batch, batch_id)


def expiry_window(months_ahead: int, today: Optional[date] = None):
    if months_ahead < 0:
        raise ValueError("months_ahead must be >= 0")
    start = today or date.today()
    return start, start + relativedelta(months=months_ahead)


def get_expiring_batches(db: Session, months_ahead: int = 6, today: Optional[date] = None) -> List[Batch]:
    """Batches expiring between today and today + months_ahead, both ends inclusive."""
    start, end = expiry_window(months_ahead, today)
    return (
        db.query(Batch)
        .filter(Batch.expiration_date >= start, Batch.expiration_date <= end)
        .order_by(Batch.expiration_date.asc(), Batch.id.asc())
        .all()
    )
