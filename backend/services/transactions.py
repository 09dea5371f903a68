# backend/services/transactions.py
import logging
import secrets
import string
import time
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from models.batch import Batch
from models.customer import Customer
from models.drug import Drug
from models.transaction import Transaction, TransactionItem, TransactionType
from models.users import User
from schemas.transaction import CheckoutRequest, TransactionCreate, TransactionItemCreate
from services.common import commit_or_raise, get_or_404
from services.errors import (
    ConstraintViolationError,
    InsufficientStockError,
    NotFoundError,
    PharmacyError,
)
from utils.dates import day_bounds
from utils.money import to_money

logger = logging.getLogger(__name__)

_NUMBER_ALPHABET = string.ascii_lowercase + string.digits


def generate_transaction_number() -> str:
    # TXN-<epoch ms>-<9 random base36 chars>
    suffix = "".join(secrets.choice(_NUMBER_ALPHABET) for _ in range(9))
    return f"TXN-{int(time.time() * 1000)}-{suffix}"


def _check_parties(db: Session, cashier_id: int, customer_id: Optional[int]) -> None:
    get_or_404(db, User, cashier_id, "Cashier")
    if customer_id is not None:
        get_or_404(db, Customer, customer_id, "Customer")


def _prescription_names(payload) -> Tuple[Optional[str], Optional[str]]:
    # Doctor and patient are only recorded on prescription sales
    if payload.type == TransactionType.PRESCRIPTION:
        return payload.doctor_name, payload.patient_name
    return None, None


def create_transaction(db: Session, payload: TransactionCreate, now: Optional[datetime] = None) -> Transaction:
    _check_parties(db, payload.cashier_id, payload.customer_id)
    doctor_name, patient_name = _prescription_names(payload)

    txn = Transaction(
        transaction_number=generate_transaction_number(),
        type=payload.type,
        customer_id=payload.customer_id,
        doctor_name=doctor_name,
        patient_name=patient_name,
        subtotal=to_money(payload.subtotal),
        discount_amount=to_money(payload.discount_amount),
        total_amount=to_money(payload.total_amount),
        payment_method=payload.payment_method,
        cashier_id=payload.cashier_id,
        transaction_date=now or datetime.now(),
    )
    db.add(txn)
    commit_or_raise(db, "Transaction")
    db.refresh(txn)
    logger.info("Transaction %s recorded, total %s", txn.transaction_number, txn.total_amount)
    return txn


def deduct_stock(db: Session, batch_id: int, drug_id: int, quantity: int) -> None:
    """Takes quantity units out of a batch with one guarded UPDATE.

    The row only changes when it belongs to the drug and still holds enough
    units, so concurrent sales cannot drive the quantity negative. When no
    row was updated the batch is re-read to report why. Nothing is committed
    here; the caller owns the unit of work.
    """
    updated = (
        db.query(Batch)
        .filter(
            Batch.id == batch_id,
            Batch.drug_id == drug_id,
            Batch.quantity >= quantity,
        )
        .update({Batch.quantity: Batch.quantity - quantity})
    )
    if updated:
        return

    batch = db.get(Batch, batch_id)
    if batch is None:
        raise NotFoundError(f"Batch with id {batch_id} not found")
    if batch.drug_id != drug_id:
        raise ConstraintViolationError(f"Batch {batch.batch_number} does not belong to drug {drug_id}")
    raise InsufficientStockError(
        f"Insufficient stock in batch {batch.batch_number}: requested {quantity}, available {batch.quantity}"
    )


def create_transaction_item(db: Session, payload: TransactionItemCreate) -> TransactionItem:
    """Records one sale line and decrements its batch in the same commit."""
    try:
        deduct_stock(db, payload.batch_id, payload.drug_id, payload.quantity)
    except PharmacyError as exc:
        db.rollback()
        logger.warning("Sale line rejected for batch %s: %s", payload.batch_id, exc)
        raise

    item = TransactionItem(
        transaction_id=payload.transaction_id,
        drug_id=payload.drug_id,
        batch_id=payload.batch_id,
        quantity=payload.quantity,
        unit_price=to_money(payload.unit_price),
        discount_amount=to_money(payload.discount_amount),
        subtotal=to_money(payload.subtotal),
    )
    db.add(item)
    # An unknown transaction id fails here and the rollback restores the batch
    commit_or_raise(db, "Transaction item")
    db.refresh(item)
    return item


def get_transaction(db: Session, transaction_id: int) -> Transaction:
    return get_or_404(db, Transaction, transaction_id, "Transaction")


def get_transactions(db: Session, on_date: Optional[date] = None) -> List[Transaction]:
    query = db.query(Transaction)
    if on_date is not None:
        start, end = day_bounds(on_date)
        query = query.filter(Transaction.transaction_date >= start, Transaction.transaction_date < end)
    return query.order_by(Transaction.transaction_date.desc(), Transaction.id.desc()).all()


# ---- checkout ----

def allocate_fefo(db: Session, drug: Drug, quantity: int, today: Optional[date] = None) -> List[Tuple[int, int]]:
    """Splits quantity over the drug's unexpired batches, earliest expiry first.

    Returns (batch_id, units) pairs. Raises InsufficientStockError when the
    sellable stock of the drug is too small.
    """
    today = today or date.today()
    batches = (
        db.query(Batch)
        .filter(
            Batch.drug_id == drug.id,
            Batch.quantity > 0,
            Batch.expiration_date >= today,
        )
        .order_by(Batch.expiration_date.asc(), Batch.id.asc())
        .all()
    )

    allocations = []
    remaining = quantity
    for batch in batches:
        if remaining == 0:
            break
        take = min(batch.quantity, remaining)
        allocations.append((batch.id, take))
        remaining -= take

    if remaining > 0:
        available = quantity - remaining
        raise InsufficientStockError(
            f"Insufficient stock for {drug.name}: requested {quantity}, available {available}"
        )
    return allocations


def checkout(db: Session, payload: CheckoutRequest, now: Optional[datetime] = None) -> Transaction:
    """Records a whole cart as one transaction.

    Prices come from the drug's tier for the sale type, stock is deducted per
    batch, and totals are computed here. Any failure rolls back the entire
    sale, including deductions already made for earlier lines.
    """
    now = now or datetime.now()
    _check_parties(db, payload.cashier_id, payload.customer_id)
    prescription = payload.type == TransactionType.PRESCRIPTION

    try:
        items: List[TransactionItem] = []
        subtotal = Decimal("0.00")
        line_discounts = Decimal("0.00")

        for line in payload.items:
            drug = get_or_404(db, Drug, line.drug_id, "Drug")
            unit_price = to_money(drug.prescription_price if prescription else drug.general_price)
            discount = to_money(line.discount_amount)
            gross = unit_price * line.quantity
            if discount >= gross:
                raise PharmacyError(f"Discount for {drug.name} must be lower than the line amount {gross}")

            if line.batch_id is not None:
                allocations = [(line.batch_id, line.quantity)]
            else:
                allocations = allocate_fefo(db, drug, line.quantity, today=now.date())

            # The line discount is booked on the first batch slice
            remaining_discount = discount
            for batch_id, units in allocations:
                deduct_stock(db, batch_id, drug.id, units)
                slice_gross = unit_price * units
                slice_discount = min(remaining_discount, slice_gross)
                remaining_discount -= slice_discount
                items.append(TransactionItem(
                    drug_id=drug.id,
                    batch_id=batch_id,
                    quantity=units,
                    unit_price=unit_price,
                    discount_amount=slice_discount,
                    subtotal=to_money(slice_gross - slice_discount),
                ))

            subtotal += gross
            line_discounts += discount

        discount_total = to_money(line_discounts + payload.discount_amount)
        total = to_money(subtotal - discount_total)
        if total <= 0:
            raise PharmacyError("Total amount after discounts must be positive")

        doctor_name, patient_name = _prescription_names(payload)
        txn = Transaction(
            transaction_number=generate_transaction_number(),
            type=payload.type,
            customer_id=payload.customer_id,
            doctor_name=doctor_name,
            patient_name=patient_name,
            subtotal=to_money(subtotal),
            discount_amount=discount_total,
            total_amount=total,
            payment_method=payload.payment_method,
            cashier_id=payload.cashier_id,
            transaction_date=now,
            items=items,
        )
        db.add(txn)
    except PharmacyError as exc:
        db.rollback()
        logger.warning("Checkout by cashier %s rejected: %s", payload.cashier_id, exc)
        raise

    commit_or_raise(db, "Checkout")
    db.refresh(txn)
    logger.info("Checkout %s: %d lines, total %s", txn.transaction_number, len(txn.items), txn.total_amount)
    return txn
