"""Errors raised by the user record layer."""


class UserError(Exception):
    """Base class for user record failures."""


class UserValidationError(UserError):
    """Input is missing a required field or violates a constraint."""


class EmailConflictError(UserError):
    """Another record already uses the email address."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email already in use: {email}")
        self.email = email


class MalformedIdentifierError(UserError):
    """Identifier is not a well-formed store identifier."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Malformed user id: {value!r}")
        self.value = value


class StoreUnavailableError(UserError):
    """The document store could not be reached."""
