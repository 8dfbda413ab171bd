from src.common.exceptions import AppError


class SessionError(AppError):
    """No usable user record in the session storage."""
    pass
