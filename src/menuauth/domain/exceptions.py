"""Domain exceptions."""


class MenuAuthError(Exception):
    """Base exception for menuauth."""

    pass


class PermissionDenied(MenuAuthError):
    """User does not have permission for the requested action."""

    pass


class NotFound(MenuAuthError):
    """Requested resource was not found."""

    pass


class ValidationError(MenuAuthError):
    """Validation failed for input data."""

    pass


class Unauthenticated(MenuAuthError):
    """No valid principal could be resolved for the caller."""

    pass
