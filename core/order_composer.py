"""
Order composition for the admin "Create Order" form.

OrderComposer keeps the in-progress (draft) order: the selected user and
an ordered list of line items, at most one per product. Nothing is sent
anywhere until submit(), which hands the draft to the order gateway.

States:
    EMPTY      - no user and no items
    EDITING    - something selected; last_error holds a failed submit message
    SUBMITTING - a submit is in flight; every mutation is rejected
"""
from decimal import Decimal
from enum import Enum
import threading
from typing import Callable, Iterable, List, Optional, Union

from core.errors import (
    ApiError,
    DuplicateProductError,
    EmptyOrderError,
    IndexOutOfRangeError,
    InvalidQuantityError,
    MissingUserError,
    NoProductSelectedError,
    OrderSubmissionError,
    SubmissionInProgressError,
    UnknownProductError,
)
from models.order import LineItem, PersistedOrder
from models.product import Product
from models.user import User

QUANTITY = "quantity"
PRODUCT_ID = "product_id"


class ComposerState(Enum):
    EMPTY = "empty"
    EDITING = "editing"
    SUBMITTING = "submitting"


def parse_quantity(value: Union[int, str]) -> int:
    """Accept an int or a numeric string of at least 1."""
    if isinstance(value, bool):
        raise InvalidQuantityError()
    if isinstance(value, int):
        quantity = value
    elif isinstance(value, str):
        try:
            quantity = int(value.strip())
        except ValueError:
            raise InvalidQuantityError()
    else:
        raise InvalidQuantityError()

    if quantity < 1:
        raise InvalidQuantityError()
    return quantity


class OrderComposer:
    """
    Draft order backed by a catalog snapshot.

    Args:
        products: Products fetched when the form loaded; inactive ones are ignored
        users: Users the order can be placed for
        gateway: Callable taking the order payload and returning the persisted
            order; raises ApiError when the server rejects it
    """

    def __init__(
        self,
        products: Iterable[Product],
        users: Iterable[User],
        gateway: Callable[[dict], PersistedOrder],
    ):
        self._catalog = {p.id: p for p in products if p.is_active}
        self.users = list(users)
        self._gateway = gateway
        self._lock = threading.Lock()

        self.user_id = ""
        self.items: List[LineItem] = []
        self.state = ComposerState.EMPTY
        self.last_error: Optional[str] = None

    # ===================== QUERIES =====================

    @property
    def products(self) -> List[Product]:
        return list(self._catalog.values())

    def product(self, product_id: str) -> Optional[Product]:
        return self._catalog.get(product_id)

    def user(self, user_id: str) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def available_products(self) -> List[Product]:
        """Active products that are not in the draft yet."""
        taken = {item.product_id for item in self.items}
        return [p for p in self._catalog.values() if p.id not in taken]

    def line_total(self, index: int) -> Decimal:
        self._check_index(index)
        return self._line_total(self.items[index])

    def compute_total(self) -> Decimal:
        """
        Sum of quantity x unit price, priced from the catalog snapshot.

        A line whose product is no longer in the snapshot counts as 0.
        """
        return sum((self._line_total(item) for item in self.items), Decimal("0"))

    def payload(self) -> dict:
        return {"userId": self.user_id, "items": [item.to_payload() for item in self.items]}

    def validate(self):
        if not self.user_id:
            raise MissingUserError()
        if not self.items:
            raise EmptyOrderError()

    # ===================== MUTATIONS =====================

    def select_user(self, user_id: Optional[str]):
        with self._lock:
            self._ensure_idle()
            self.user_id = user_id or ""
            self._settle()

    def add_line_item(self, product_id: Optional[str]) -> LineItem:
        with self._lock:
            self._ensure_idle()
            item = LineItem(product_id=self._check_product(product_id), quantity=1)
            self.items.append(item)
            self._settle()
            return item

    def update_line_item(self, index: int, field: str, value):
        """Replace the quantity or the product of the line at `index`."""
        with self._lock:
            self._ensure_idle()
            self._check_index(index)
            current = self.items[index]
            if field == QUANTITY:
                self.items[index] = LineItem(current.product_id, parse_quantity(value))
            elif field in (PRODUCT_ID, "productId"):
                product_id = self._check_product(value, skip_index=index)
                self.items[index] = LineItem(product_id, current.quantity)
            else:
                raise ValueError(f"Unknown line item field: {field}")
            self._settle()

    def remove_line_item(self, index: int):
        with self._lock:
            self._ensure_idle()
            self._check_index(index)
            del self.items[index]
            self._settle()

    def replace_catalog(self, products: Iterable[Product]):
        """Swap in a newer catalog snapshot; existing lines are kept as-is."""
        with self._lock:
            self._ensure_idle()
            self._catalog = {p.id: p for p in products if p.is_active}
            self._settle()

    def cancel(self):
        """Discard the draft."""
        with self._lock:
            self._ensure_idle()
            self._reset()

    def submit(self) -> PersistedOrder:
        """
        Validate and send the draft to the gateway.

        On success the draft is reset and the persisted order returned. On
        failure the draft is kept and OrderSubmissionError carries the message
        to show.
        """
        with self._lock:
            self._ensure_idle()
            self.validate()
            payload = self.payload()
            self.state = ComposerState.SUBMITTING
            self.last_error = None

        try:
            order = self._gateway(payload)
        except ApiError as e:
            message = e.message or OrderSubmissionError.default_message
            self._fail(message)
            raise OrderSubmissionError(message) from e
        except Exception:
            self._fail(OrderSubmissionError.default_message)
            raise

        with self._lock:
            self._reset()
        return order

    # ===================== INTERNALS =====================

    def _ensure_idle(self):
        if self.state == ComposerState.SUBMITTING:
            raise SubmissionInProgressError()

    def _settle(self):
        self.last_error = None
        if not self.user_id and not self.items:
            self.state = ComposerState.EMPTY
        else:
            self.state = ComposerState.EDITING

    def _reset(self):
        self.user_id = ""
        self.items = []
        self.last_error = None
        self.state = ComposerState.EMPTY

    def _fail(self, message: str):
        with self._lock:
            self.state = ComposerState.EDITING
            self.last_error = message

    def _check_index(self, index):
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self.items):
            raise IndexOutOfRangeError()

    def _check_product(self, product_id, skip_index: Optional[int] = None) -> str:
        if not product_id:
            raise NoProductSelectedError()
        product_id = str(product_id)
        for i, item in enumerate(self.items):
            if i != skip_index and item.product_id == product_id:
                raise DuplicateProductError()
        if product_id not in self._catalog:
            raise UnknownProductError()
        return product_id

    def _line_total(self, item: LineItem) -> Decimal:
        product = self._catalog.get(item.product_id)
        if product is None:
            return Decimal("0")
        return product.price * item.quantity
