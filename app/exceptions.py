from typing import Any, Mapping, Optional


class ServiceValidationError(Exception):
    """Raised when input data is invalid or a precondition for a service call is not met.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers (400)
    """

    http_status = 400
    default_code = "VALIDATION_ERROR"

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        return {"error": self.message}

    def __str__(self) -> str:
        return self.message


class MissingParameterError(ServiceValidationError):
    """A required query parameter or body field is absent or empty."""

    default_code = "MISSING_PARAMETER"


class InvalidCategoryError(ServiceValidationError):
    """Category is not one of breakfast, lunch or dinner."""

    default_code = "INVALID_CATEGORY"

    def __init__(self, message: str = "Invalid category. Must be breakfast, lunch, or dinner", **kwargs):
        super().__init__(message, **kwargs)


class MealNotFoundError(ServiceValidationError):
    """No meal matches the given name in the given category."""

    default_code = "MEAL_NOT_FOUND"


class NoMealsInCategoryError(ServiceValidationError):
    """A random pick was requested from a category with no meals."""

    default_code = "NO_MEALS_IN_CATEGORY"


class DuplicateMealError(ServiceValidationError):
    """The (name, category) pair already exists."""

    default_code = "DUPLICATE_MEAL"


class NotFoundError(Exception):
    """Raised when a requested resource was not found.

    Attributes are similar to ServiceValidationError. http_status is 404.
    """

    http_status = 404
    default_code = "NOT_FOUND"

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        return {"error": self.message}

    def __str__(self) -> str:
        return self.message


class MenuNotFoundError(NotFoundError):
    """No menu row exists for the requested date."""

    default_code = "MENU_NOT_FOUND"


class StoreError(Exception):
    """Raised when the underlying database engine reports an error.

    The message is the engine's own error text. http_status is 500.
    """

    http_status = 500

    def __init__(self, message: str = "Store failure", code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code or "STORE_FAILURE"

    def to_dict(self) -> dict:
        return {"error": self.message}

    def __str__(self) -> str:
        return self.message
