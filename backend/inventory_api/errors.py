"""Error kinds raised by the store and the request handler.

Every error carries the HTTP status it maps to and a plain-text message, so the
handler can turn any of them into a response without inspecting its type.
"""

from typing import Optional


class InventoryError(Exception):
    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MalformedRequest(InventoryError):
    """Body is not decodable JSON or the id segment is not an integer."""

    status_code = 400
    default_message = "Invalid JSON"


class ValidationError(InventoryError):
    """A create candidate broke one of the field rules."""

    status_code = 400
    default_message = "Invalid item"


class NotFound(InventoryError):
    status_code = 404
    default_message = "Item not found"


class MethodNotAllowed(InventoryError):
    status_code = 405
    default_message = "Method not allowed"
