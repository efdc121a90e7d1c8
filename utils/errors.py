"""
utils/errors.py

Application exceptions. The handlers in middlewares/error_handler.py turn
them into `{"error": message}` responses with the matching status code.
"""


class AppError(Exception):
    """Base class for errors that map to a client-facing response"""
    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(AppError):
    """Malformed input, bad date format, out-of-range parameters"""
    status_code = 400


class NotFoundError(AppError):
    """A referenced entity does not exist"""
    status_code = 404

    def __init__(self, entity: str):
        super().__init__(f"{entity} not found")
        self.entity = entity


class UnknownCategoryError(ValidationError):
    """Assignment category outside the supported set"""

    def __init__(self, category: str):
        super().__init__(f"Unknown assignment category: {category}")
        self.category = category
