class FinanceError(Exception):
    """Base class for errors the API turns into user-facing responses."""

    status_code = 400
    code = "finance_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CategoryInUseError(FinanceError):
    """A category still has transactions pointing at it."""

    status_code = 409
    code = "category_in_use"

    def __init__(self, category_id: str, references: int | None = None):
        super().__init__(
            "No puedes eliminar esta categoría porque tiene transacciones asociadas. "
            "Elimina primero esas transacciones."
        )
        self.category_id = category_id
        self.references = references


class CategoryMismatchError(FinanceError):
    status_code = 422
    code = "invalid_category"
