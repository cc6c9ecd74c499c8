"""API errors and validation helpers."""


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


MAX_LOCATION_LENGTH = 200


def validate_location(location: str) -> None:
    """Validate location is a non-blank name of sane length."""
    if not isinstance(location, str) or not location.strip():
        raise ValidationError("Invalid location: must be a non-empty string")
    if len(location) > MAX_LOCATION_LENGTH:
        raise ValidationError(f"Invalid location: longer than {MAX_LOCATION_LENGTH} characters")
