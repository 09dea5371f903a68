# backend/utils/pdf.py

from pathlib import Path
from typing import Optional

from reportlab.lib.pagesizes import A5
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from config import settings
from models.transaction import Transaction, TransactionType

FONT_REGULAR_NAME = "Helvetica"
FONT_BOLD_NAME = "Helvetica-Bold"


def ensure_storage_dir() -> Path:
    storage = Path(settings.RECEIPT_DIR)
    storage.mkdir(parents=True, exist_ok=True)
    return storage


def get_receipt_path(txn: Transaction) -> Path:
    """Returns the PDF path of a sale receipt, named after the transaction number."""
    return ensure_storage_dir() / f"{txn.transaction_number}.pdf"


def _money(value) -> str:
    return f"{float(value or 0):,.2f}"


def generate_receipt_pdf(txn: Transaction, out_path: Path, pharmacy: Optional[dict] = None) -> None:
    """
    Renders a sale receipt:
    - Pharmacy header (name and address)
    - Transaction number, date, cashier and payment method
    - Prescriber and patient for prescription sales
    - Item lines with batch numbers
    - Subtotal, discount and total
    """
    pharmacy = pharmacy or {"name": settings.PHARMACY_NAME, "address": settings.PHARMACY_ADDRESS}

    c = canvas.Canvas(str(out_path), pagesize=A5)
    width, height = A5

    def draw_text(x, y, text, font=FONT_REGULAR_NAME, size=9, align="left"):
        c.setFont(font, size)
        text_str = str(text) if text is not None else ""
        if align == "right":
            c.drawRightString(x, y, text_str)
        elif align == "center":
            c.drawCentredString(x, y, text_str)
        else:
            c.drawString(x, y, text_str)

    left, right = 12 * mm, width - 12 * mm

    # --- Header ---
    y = height - 15 * mm
    draw_text(width / 2, y, pharmacy.get("name") or "", font=FONT_BOLD_NAME, size=14, align="center")
    if pharmacy.get("address"):
        y -= 5 * mm
        draw_text(width / 2, y, pharmacy["address"], size=8, align="center")

    y -= 6 * mm
    c.setLineWidth(0.5)
    c.line(left, y, right, y)
    y -= 6 * mm

    draw_text(left, y, f"No: {txn.transaction_number}", font=FONT_BOLD_NAME)
    draw_text(right, y, txn.transaction_date.strftime("%Y-%m-%d %H:%M"), align="right")
    y -= 5 * mm

    cashier = txn.cashier.full_name if txn.cashier else f"#{txn.cashier_id}"
    draw_text(left, y, f"Cashier: {cashier}")
    draw_text(right, y, f"Payment: {txn.payment_method.value.replace('_', ' ')}", align="right")
    y -= 5 * mm

    if txn.customer:
        draw_text(left, y, f"Customer: {txn.customer.name}")
        y -= 5 * mm

    if txn.type == TransactionType.PRESCRIPTION:
        draw_text(left, y, f"Doctor: {txn.doctor_name or '-'}")
        draw_text(right, y, f"Patient: {txn.patient_name or '-'}", align="right")
        y -= 5 * mm

    # --- Items ---
    y -= 3 * mm
    c.setFillColorRGB(0.95, 0.95, 0.95)
    c.rect(left, y - 2 * mm, right - left, 7 * mm, fill=1, stroke=0)
    c.setFillColorRGB(0, 0, 0)

    c.setFont(FONT_BOLD_NAME, 8)
    c.drawString(left + 2 * mm, y, "Item")
    c.drawRightString(left + 75 * mm, y, "Qty")
    c.drawRightString(left + 98 * mm, y, "Price")
    c.drawRightString(right - 2 * mm, y, "Amount")
    y -= 7 * mm

    for it in txn.items:
        name = it.drug.name if it.drug else f"ID:{it.drug_id}"
        batch_no = it.batch.batch_number if it.batch else it.batch_id

        draw_text(left + 2 * mm, y, str(name)[:38], size=8)
        draw_text(left + 75 * mm, y, it.quantity, size=8, align="right")
        draw_text(left + 98 * mm, y, _money(it.unit_price), size=8, align="right")
        draw_text(right - 2 * mm, y, _money(it.subtotal), size=8, align="right")
        y -= 4 * mm
        draw_text(left + 4 * mm, y, f"Batch {batch_no}", size=7)
        if it.discount_amount:
            draw_text(right - 2 * mm, y, f"-{_money(it.discount_amount)}", size=7, align="right")
        y -= 5 * mm

        if y < 30 * mm:
            c.showPage()
            y = height - 15 * mm

    # --- Totals ---
    c.line(left, y + 2 * mm, right, y + 2 * mm)
    y -= 4 * mm
    draw_text(left + 98 * mm, y, "Subtotal:", align="right")
    draw_text(right - 2 * mm, y, _money(txn.subtotal), align="right")
    y -= 5 * mm
    draw_text(left + 98 * mm, y, "Discount:", align="right")
    draw_text(right - 2 * mm, y, _money(txn.discount_amount), align="right")
    y -= 6 * mm
    draw_text(left + 98 * mm, y, "TOTAL:", font=FONT_BOLD_NAME, size=11, align="right")
    draw_text(right - 2 * mm, y, _money(txn.total_amount), font=FONT_BOLD_NAME, size=11, align="right")

    y -= 12 * mm
    draw_text(width / 2, y, "Thank you. Get well soon.", size=8, align="center")

    c.showPage()
    c.save()
