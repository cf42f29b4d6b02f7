"""
Error types for the admin panel.

Composer errors are local validation failures raised before any network
call. ApiError and its subclasses come from the REST boundary and always
carry a message that can be shown to the admin as-is.
"""
from typing import Optional


class ComposerError(Exception):
    """Base class for order composition errors."""

    default_message = "Invalid order"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingUserError(ComposerError):
    default_message = "Please select a user"


class EmptyOrderError(ComposerError):
    default_message = "Please add at least one product to the order"


class NoProductSelectedError(ComposerError):
    default_message = "Please select a product"


class DuplicateProductError(ComposerError):
    default_message = "This product is already in the order"


class UnknownProductError(ComposerError):
    default_message = "This product is not available"


class InvalidQuantityError(ComposerError):
    default_message = "Quantity must be a whole number of at least 1"


class IndexOutOfRangeError(ComposerError):
    default_message = "No order item at that position"


class SubmissionInProgressError(ComposerError):
    default_message = "An order is already being submitted"


class OrderSubmissionError(ComposerError):
    """The gateway rejected the order; the draft is kept for a retry."""

    default_message = "Failed to create order"


class ApiError(Exception):
    """
    Error returned by (or while talking to) the REST API.

    Attributes:
        message: Display message (server `message` field or a fallback)
        status_code: HTTP status code, None for transport failures
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class FetchError(ApiError):
    """A list request failed; the view should offer a manual retry."""


class AuthenticationError(ApiError):
    """Login rejected or session no longer valid."""
