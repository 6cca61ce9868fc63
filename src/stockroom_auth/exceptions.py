"""Authentication exceptions.

These exceptions are raised by the stockroom_auth package and are
translated to 401 responses by the API exception handlers, except for
WeakPasswordError (400) and ConfigurationError (fatal at startup).
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class AuthenticationRequiredError(AuthError):
    """Raised when a protected resource is requested without a bearer token."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login.

    The message is the same for an unknown email and a wrong password.
    """

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class ConfigurationError(Exception):
    """Raised when the auth infrastructure is misconfigured.

    This is a startup failure, never a per-request error.
    """

    def __init__(self, message: str = "Authentication is not configured"):
        self.message = message
        super().__init__(self.message)
