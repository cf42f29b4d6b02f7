"""
Shared utility functions for admin panel
"""
import re
from decimal import Decimal, InvalidOperation

from core.config import CURRENCY_SYMBOL

def is_valid_email(email_str: str) -> bool:
    """Check if email format is valid"""
    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return re.match(pattern, email_str or "") is not None

def parse_price(value: str):
    """Parse a price field; returns a non-negative Decimal or None"""
    try:
        price = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not price.is_finite() or price < 0:
        return None
    return price.quantize(Decimal("0.01"))

def format_currency(amount) -> str:
    return f"{CURRENCY_SYMBOL}{Decimal(str(amount or 0)):,.2f}"

def close_dialog(page, dialog):
    """Close a dialog and update the page"""
    dialog.open = False
    page.update()
