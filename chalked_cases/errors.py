class InvalidArgument(ValueError):
    """Raised when a caller passes a value the conversion cannot work with."""


class DeveloperError(RuntimeError):
    """Raised when a case option reaches a branch that has no handler."""
