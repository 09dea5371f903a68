from models.users import User
from models.supplier import Supplier
from models.customer import Customer
from models.drug import Drug, DrugCategory
from models.batch import Batch
from models.transaction import Transaction, TransactionItem, TransactionType, PaymentMethod
from models.expense import Expense, ExpenseType
from models.purchase_order import PurchaseOrder, PurchaseOrderStatus
from models.log import Log

__all__ = [
    "User",
    "Supplier",
    "Customer",
    "Drug",
    "DrugCategory",
    "Batch",
    "Transaction",
    "TransactionItem",
    "TransactionType",
    "PaymentMethod",
    "Expense",
    "ExpenseType",
    "PurchaseOrder",
    "PurchaseOrderStatus",
    "Log",
]
