# backend/routes/partners.py
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from database import get_db
from services import partners as partner_service
from schemas.partner import CustomerCreate, CustomerOut, SupplierCreate, SupplierOut
from utils.audit import client_ip, write_log

router = APIRouter(tags=["Suppliers & Customers"])


# ---- Suppliers ----
@router.post("/suppliers", response_model=SupplierOut, status_code=201)
def create_supplier(payload: SupplierCreate, request: Request, db: Session = Depends(get_db)):
    supplier = partner_service.create_supplier(db, payload)
    write_log(
        db, user_id=None, action="SUPPLIER_CREATE", resource="suppliers", status="SUCCESS",
        ip=client_ip(request), meta={"supplier_id": supplier.id}
    )
    return supplier


@router.get("/suppliers", response_model=List[SupplierOut])
def get_suppliers(db: Session = Depends(get_db)):
    return partner_service.get_suppliers(db)


# ---- Customers ----
@router.post("/customers", response_model=CustomerOut, status_code=201)
def create_customer(payload: CustomerCreate, request: Request, db: Session = Depends(get_db)):
    customer = partner_service.create_customer(db, payload)
    write_log(
        db, user_id=None, action="CUSTOMER_CREATE", resource="customers", status="SUCCESS",
        ip=client_ip(request), meta={"customer_id": customer.id}
    )
    return customer


@router.get("/customers", response_model=List[CustomerOut])
def get_customers(db: Session = Depends(get_db)):
    return partner_service.get_customers(db)
