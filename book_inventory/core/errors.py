"""Application error taxonomy. Each error carries the HTTP status it maps to."""


class AppError(Exception):
    """Base for errors raised by services and security helpers."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(AppError):
    """Bad input shape or constraint violation."""

    status_code = 400


class EmptyFieldError(ValidationError):
    pass


class WeakPasswordError(ValidationError):
    pass


class PasswordTooLongError(ValidationError):
    pass


class ConflictError(AppError):
    """Duplicate username or email. Reported as 400 like other input errors."""

    status_code = 400


class UsernameTakenError(ConflictError):
    def __init__(self, message: str = "username already exists") -> None:
        super().__init__(message)


class EmailTakenError(ConflictError):
    def __init__(self, message: str = "email already exists") -> None:
        super().__init__(message)


class AuthenticationError(AppError):
    """Missing, invalid or expired token, or bad credentials."""

    status_code = 401


class InvalidCredentialsError(AuthenticationError):
    def __init__(self, message: str = "invalid credentials") -> None:
        super().__init__(message)


class PasswordMismatchError(AuthenticationError):
    def __init__(self, message: str = "password does not match") -> None:
        super().__init__(message)


class TokenError(AuthenticationError):
    """Token could not be validated; the subclass names the reason."""


class MalformedTokenError(TokenError):
    pass


class BadSignatureError(TokenError):
    pass


class ExpiredTokenError(TokenError):
    pass


class WrongAlgorithmError(TokenError):
    pass


class InvalidClaimsError(TokenError):
    pass


class AuthorizationError(AppError):
    """Authenticated but the role is insufficient."""

    status_code = 403


class NotFoundError(AppError):
    status_code = 404


class InternalError(AppError):
    """Store or signing failure."""

    status_code = 500
