# backend/routes/batches.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from services import batches as batch_service
from schemas.batch import BatchCreate, BatchOut
from utils.audit import client_ip, write_log

router = APIRouter(prefix="/batches", tags=["Batches"])


@router.post("", response_model=BatchOut, status_code=201)
def create_batch(payload: BatchCreate, request: Request, db: Session = Depends(get_db)):
    batch = batch_service.create_batch(db, payload)
    write_log(
        db, user_id=None, action="BATCH_CREATE", resource="batches", status="SUCCESS",
        ip=client_ip(request),
        meta={"batch_id": batch.id, "drug_id": batch.drug_id, "quantity": batch.quantity}
    )
    return batch


@router.get("/expiring", response_model=List[BatchOut])
def get_expiring_batches(
    months_ahead: Optional[int] = Query(None, description="Window length in months, defaults to EXPIRY_WINDOW_MONTHS"),
    db: Session = Depends(get_db),
):
    if months_ahead is None:
        months_ahead = settings.EXPIRY_WINDOW_MONTHS
    try:
        return batch_service.get_expiring_batches(db, months_ahead)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


# A missing batch is answered with null rather than 404
@router.get("/{batch_id}", response_model=Optional[BatchOut])
def get_batch_by_id(batch_id: int, db: Session = Depends(get_db)):
    return batch_service.get_batch_by_id(db, batch_id)
