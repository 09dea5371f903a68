# backend/services/drugs.py
import logging
from typing import List

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from models.drug import Drug
from models.batch import Batch
from schemas.drug import DrugCreate
from services.common import commit_or_raise, get_or_404
from utils.money import to_money

logger = logging.getLogger(__name__)

PRICE_FIELDS = ("purchase_price", "prescription_price", "general_price", "insurance_price")


def create_drug(db: Session, payload: DrugCreate) -> Drug:
    data = payload.model_dump()
    for field in PRICE_FIELDS:
        data[field] = to_money(data[field])

    drug = Drug(**data)
    db.add(drug)
    commit_or_raise(db, "Drug")
    db.refresh(drug)
    logger.info("Drug %s created (%s)", drug.id, drug.name)
    return drug


def get_drugs(db: Session) -> List[Drug]:
    return db.query(Drug).order_by(Drug.id.asc()).all()


def get_drug(db: Session, drug_id: int) -> Drug:
    return get_or_404(db, Drug, drug_id, "Drug")


def search_drugs(db: Session, text: str) -> List[Drug]:
    """Case-insensitive substring match on name, active ingredient and barcode.

    A blank query returns nothing and never reaches the database.
    """
    term = (text or "").strip()
    if not term:
        return []

    like = f"%{term}%"
    return (
        db.query(Drug)
        .filter(or_(
            Drug.name.ilike(like),
            Drug.active_ingredient.ilike(like),
            Drug.barcode.ilike(like),
        ))
        .order_by(Drug.id.asc())
        .all()
    )


def stock_on_hand(db: Session, drug_id: int) -> int:
    total = db.query(func.coalesce(func.sum(Batch.quantity), 0)).filter(Batch.drug_id == drug_id).scalar()
    return int(total or 0)


def get_low_stock_drugs(db: Session) -> List[Drug]:
    """Drugs whose summed batch quantity is below minimum_stock.

    The outer join keeps drugs without any batch; they count as zero stock.
    """
    total_stock = func.coalesce(func.sum(Batch.quantity), 0)
    return (
        db.query(Drug)
        .outerjoin(Batch, Batch.drug_id == Drug.id)
        .group_by(Drug.id)
        .having(total_stock < Drug.minimum_stock)
        .order_by(Drug.id.asc())
        .all()
    )
