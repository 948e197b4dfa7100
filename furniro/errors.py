# furniro/errors.py
"""Domain errors raised by the catalog store.

Every client-facing failure carries a human readable ``message`` and
the HTTP status it maps to. The application registers a single handler
for ``CatalogError`` which renders ``{"message": ...}``.
"""


class CatalogError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFound(CatalogError):
    """Raised when an identifier does not exist in its collection."""

    status_code = 404


class ValidationError(CatalogError):
    """Raised when a required field is missing from a create payload."""

    status_code = 400
