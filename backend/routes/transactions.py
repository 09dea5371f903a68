# backend/routes/transactions.py
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from database import get_db
from services import transactions as txn_service
from services.errors import PharmacyError
from schemas.transaction import (
    CheckoutRequest,
    TransactionCreate,
    TransactionDetail,
    TransactionItemCreate,
    TransactionItemOut,
    TransactionOut,
)
from utils.audit import client_ip, write_log
from utils.pdf import generate_receipt_pdf, get_receipt_path

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.post("", response_model=TransactionOut, status_code=201)
def create_transaction(payload: TransactionCreate, request: Request, db: Session = Depends(get_db)):
    txn = txn_service.create_transaction(db, payload)
    write_log(
        db, user_id=txn.cashier_id, action="TRANSACTION_CREATE", resource="transactions", status="SUCCESS",
        ip=client_ip(request),
        meta={"transaction_id": txn.id, "number": txn.transaction_number, "total": float(txn.total_amount)}
    )
    return txn


@router.post("/items", response_model=TransactionItemOut, status_code=201)
def create_transaction_item(payload: TransactionItemCreate, request: Request, db: Session = Depends(get_db)):
    meta = {
        "transaction_id": payload.transaction_id,
        "batch_id": payload.batch_id,
        "quantity": payload.quantity,
    }
    try:
        item = txn_service.create_transaction_item(db, payload)
    except PharmacyError as exc:
        write_log(
            db, user_id=None, action="TRANSACTION_ITEM_CREATE", resource="transactions", status="FAIL",
            ip=client_ip(request), meta={**meta, "error": str(exc)}
        )
        raise

    write_log(
        db, user_id=None, action="TRANSACTION_ITEM_CREATE", resource="transactions", status="SUCCESS",
        ip=client_ip(request), meta={**meta, "item_id": item.id}
    )
    return item


@router.post("/checkout", response_model=TransactionDetail, status_code=201)
def checkout(payload: CheckoutRequest, request: Request, db: Session = Depends(get_db)):
    """Records a whole cart as one sale, decrementing batches in the same commit."""
    try:
        txn = txn_service.checkout(db, payload)
    except PharmacyError as exc:
        write_log(
            db, user_id=None, action="CHECKOUT", resource="transactions", status="FAIL",
            ip=client_ip(request), meta={"cashier_id": payload.cashier_id, "error": str(exc)}
        )
        raise

    write_log(
        db, user_id=txn.cashier_id, action="CHECKOUT", resource="transactions", status="SUCCESS",
        ip=client_ip(request),
        meta={"transaction_id": txn.id, "lines": len(txn.items), "total": float(txn.total_amount)}
    )
    return txn


@router.get("", response_model=List[TransactionOut])
def get_transactions(
    on_date: Optional[date] = Query(None, alias="date", description="Only sales of this day (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    return txn_service.get_transactions(db, on_date)


@router.get("/{transaction_id}", response_model=TransactionDetail)
def get_transaction(transaction_id: int, db: Session = Depends(get_db)):
    return txn_service.get_transaction(db, transaction_id)


@router.get("/{transaction_id}/receipt")
def download_receipt(transaction_id: int, db: Session = Depends(get_db)):
    txn = txn_service.get_transaction(db, transaction_id)
    pdf_path = get_receipt_path(txn)
    generate_receipt_pdf(txn, pdf_path)

    return FileResponse(
        path=str(pdf_path),
        media_type="application/pdf",
        filename=f"{txn.transaction_number}.pdf",
    )
