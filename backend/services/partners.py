# backend/services/partners.py
import logging
from typing import List

from sqlalchemy.orm import Session

from models.customer import Customer
from models.supplier import Supplier
from schemas.partner import CustomerCreate, SupplierCreate
from services.common import commit_or_raise

logger = logging.getLogger(__name__)


def create_supplier(db: Session, payload: SupplierCreate) -> Supplier:
    supplier = Supplier(**payload.model_dump())
    db.add(supplier)
    commit_or_raise(db, "Supplier")
    db.refresh(supplier)
    logger.info("Supplier %s created (%s)", supplier.id, supplier.name)
    return supplier


def get_suppliers(db: Session) -> List[Supplier]:
    return db.query(Supplier).order_by(Supplier.id.asc()).all()


def create_customer(db: Session, payload: CustomerCreate) -> Customer:
    customer = Customer(**payload.model_dump())
    db.add(customer)
    commit_or_raise(db, "Customer")
    db.refresh(customer)
    logger.info("Customer %s created", customer.id)
    return customer


def get_customers(db: Session) -> List[Customer]:
    return db.query(Customer).order_by(Customer.id.asc()).all()
