"""Domain errors."""


class InvalidArgumentError(ValueError):
    """Raised when an argument is absent, out of range or malformed."""
