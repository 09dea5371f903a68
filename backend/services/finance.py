# backend/services/finance.py
import logging
import secrets
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from models.expense import Expense
from models.purchase_order import PurchaseOrder, PurchaseOrderStatus
from models.users import User
from schemas.finance import ExpenseCreate, PurchaseOrderCreate
from services.common import commit_or_raise, get_or_404
from utils.money import to_money

logger = logging.getLogger(__name__)


def create_expense(db: Session, payload: ExpenseCreate) -> Expense:
    get_or_404(db, User, payload.created_by, "User")
    expense = Expense(
        type=payload.type,
        description=payload.description,
        amount=to_money(payload.amount),
        expense_date=payload.expense_date,
        created_by=payload.created_by,
    )
    db.add(expense)
    commit_or_raise(db, "Expense")
    db.refresh(expense)
    logger.info("Expense %s booked: %s %s", expense.id, expense.type.value, expense.amount)
    return expense


def get_expenses(db: Session, date_from: Optional[date] = None, date_to: Optional[date] = None) -> List[Expense]:
    query = db.query(Expense)
    if date_from:
        query = query.filter(Expense.expense_date >= date_from)
    if date_to:
        query = query.filter(Expense.expense_date <= date_to)
    return query.order_by(Expense.expense_date.desc(), Expense.id.desc()).all()


def generate_po_number(order_date: date) -> str:
    # PO-<order date>-<6 hex chars>
    return f"PO-{order_date.strftime('%Y%m%d')}-{secrets.token_hex(3).upper()}"


def create_purchase_order(db: Session, payload: PurchaseOrderCreate) -> PurchaseOrder:
    get_or_404(db, User, payload.created_by, "User")
    po = PurchaseOrder(
        po_number=generate_po_number(payload.order_date),
        supplier_id=payload.supplier_id,
        status=PurchaseOrderStatus.PENDING,
        total_amount=to_money(payload.total_amount),
        order_date=payload.order_date,
        expected_delivery=payload.expected_delivery,
        created_by=payload.created_by,
    )
    db.add(po)
    # An unknown supplier id is rejected by the foreign key
    commit_or_raise(db, "Purchase order")
    db.refresh(po)
    logger.info("Purchase order %s placed with supplier %s", po.po_number, po.supplier_id)
    return po


def get_purchase_orders(db: Session) -> List[PurchaseOrder]:
    return db.query(PurchaseOrder).order_by(PurchaseOrder.order_date.desc(), PurchaseOrder.id.desc()).all()
