from typing import Any
from src.common.exceptions import AppError


class MalformedRecordError(AppError):
    """A raw bill record could not be turned into a display record."""

    def __init__(self, message: str, record: Any = None):
        self.record = record
        super().__init__(message)
