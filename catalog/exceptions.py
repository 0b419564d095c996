"""Domain exceptions raised by the service layer."""


class CatalogError(Exception):
    """Base class for catalog service errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(CatalogError):
    """No live record matches the requested id."""

    status_code = 404


class ConflictError(CatalogError):
    """A uniqueness constraint rejected the write."""

    status_code = 409


class InvalidReferenceError(CatalogError):
    """A payload field points at a record that cannot be used."""

    status_code = 400

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field
