# backend/routes/finance.py
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from database import get_db
from services import finance as finance_service
from schemas.finance import ExpenseCreate, ExpenseOut, PurchaseOrderCreate, PurchaseOrderOut
from utils.audit import client_ip, write_log

router = APIRouter(tags=["Expenses & Purchase orders"])


@router.post("/expenses", response_model=ExpenseOut, status_code=201)
def create_expense(payload: ExpenseCreate, request: Request, db: Session = Depends(get_db)):
    expense = finance_service.create_expense(db, payload)
    write_log(
        db, user_id=expense.created_by, action="EXPENSE_CREATE", resource="expenses", status="SUCCESS",
        ip=client_ip(request), meta={"expense_id": expense.id, "amount": float(expense.amount)}
    )
    return expense


@router.get("/expenses", response_model=List[ExpenseOut])
def get_expenses(
    date_from: Optional[date] = Query(None, description="From (YYYY-MM-DD), inclusive"),
    date_to: Optional[date] = Query(None, description="To (YYYY-MM-DD), inclusive"),
    db: Session = Depends(get_db),
):
    if date_from and date_to and date_from > date_to:
        raise HTTPException(status_code=400, detail="date_from must not be after date_to")
    return finance_service.get_expenses(db, date_from, date_to)


@router.post("/purchase-orders", response_model=PurchaseOrderOut, status_code=201)
def create_purchase_order(payload: PurchaseOrderCreate, request: Request, db: Session = Depends(get_db)):
    po = finance_service.create_purchase_order(db, payload)
    write_log(
        db, user_id=po.created_by, action="PURCHASE_ORDER_CREATE", resource="purchase_orders", status="SUCCESS",
        ip=client_ip(request), meta={"po_id": po.id, "po_number": po.po_number}
    )
    return po


@router.get("/purchase-orders", response_model=List[PurchaseOrderOut])
def get_purchase_orders(db: Session = Depends(get_db)):
    return finance_service.get_purchase_orders(db)
