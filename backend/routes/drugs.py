# backend/routes/drugs.py
from typing import List

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from database import get_db
from services import batches as batch_service
from services import drugs as drug_service
from schemas.batch import BatchOut
from schemas.drug import DrugCreate, DrugOut
from utils.audit import client_ip, write_log

router = APIRouter(prefix="/drugs", tags=["Drugs"])


@router.post("", response_model=DrugOut, status_code=201)
def create_drug(payload: DrugCreate, request: Request, db: Session = Depends(get_db)):
    drug = drug_service.create_drug(db, payload)
    write_log(
        db, user_id=None, action="DRUG_CREATE", resource="drugs", status="SUCCESS",
        ip=client_ip(request), meta={"drug_id": drug.id, "name": drug.name}
    )
    return drug


@router.get("", response_model=List[DrugOut])
def get_drugs(db: Session = Depends(get_db)):
    return drug_service.get_drugs(db)


# Static paths are registered before /{drug_id}
@router.get("/search", response_model=List[DrugOut])
def search_drugs(q: str = Query("", description="Name, active ingredient or barcode fragment"), db: Session = Depends(get_db)):
    return drug_service.search_drugs(db, q)


@router.get("/low-stock", response_model=List[DrugOut])
def get_low_stock_drugs(db: Session = Depends(get_db)):
    """Drugs whose summed batch quantity is below their minimum stock."""
    return drug_service.get_low_stock_drugs(db)


@router.get("/{drug_id}", response_model=DrugOut)
def get_drug(drug_id: int, db: Session = Depends(get_db)):
    return drug_service.get_drug(db, drug_id)


@router.get("/{drug_id}/batches", response_model=List[BatchOut])
def get_batches_by_drug(drug_id: int, db: Session = Depends(get_db)):
    return batch_service.get_batches_by_drug(db, drug_id)
