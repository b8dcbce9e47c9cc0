from __future__ import annotations


class RegistryError(Exception):
    """Base class for every error the user registry surfaces to clients.

    Each subclass carries the HTTP status it maps to and a default
    human-readable message. Raising one never leaves the registry partially
    mutated: validation always runs before any write.
    """

    status_code: int = 400
    message: str = "Request failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class UserValidationError(RegistryError):
    pass


class MissingField(UserValidationError):
    message = "Required fields: name, email"


class InvalidEmailFormat(UserValidationError):
    message = "Invalid email format"


class InvalidAge(UserValidationError):
    message = "Age must be a number between 0 and 120"


class DuplicateEmail(UserValidationError):
    status_code = 409
    message = "Email is already registered"


class UserLookupError(RegistryError):
    pass


class InvalidId(UserLookupError):
    message = "ID must be a positive number"


class NotFound(UserLookupError):
    status_code = 404
    message = "User not found"


class NotFoundEndpoint(RegistryError):
    status_code = 404
    message = "Endpoint not found"
