from typing import Optional
from src.common.exceptions import AppError


class TransportError(AppError):
    """The store rejected a request or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
