# backend/services/errors.py


class PharmacyError(RuntimeError):
    """Base class for failures raised by the record handlers."""
    status_code = 400


class NotFoundError(PharmacyError):
    """A referenced cashier, customer, batch, drug or transaction does not exist."""
    status_code = 404


class InsufficientStockError(PharmacyError):
    """The requested quantity exceeds what the batch (or the drug) has on hand."""
    status_code = 409


class ConstraintViolationError(PharmacyError):
    """The store refused the write: duplicate key, unknown reference, or mismatched batch."""
    status_code = 409
