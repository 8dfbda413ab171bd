import json
from collections.abc import Mapping
from typing import Optional

from pydantic import Field, ValidationError, field_validator

from src.common.schemas import AppBaseModel
from src.users.exceptions import SessionError

SESSION_USER_KEY = "user"


class UserSession(AppBaseModel):
    """
    Current user, as serialized by the front-end in its local storage
    under the ``user`` key: ``{"type": "Employee", "email": "a@a"}``.
    """

    type: str = Field(
        ...,
        description="Account type (Employee, Admin)"
    )

    email: str = Field(
        ...,
        min_length=1,
        description="E-mail used as the bill owner"
    )

    @field_validator('type')
    @classmethod
    def validate_type(cls, v: str) -> str:
        if not v:
            raise ValueError("User type cannot be empty")
        return v

    @classmethod
    def from_serialized(cls, raw: Optional[str]) -> "UserSession":
        """
        Parse a serialized user record.

        Raises:
            SessionError: If the record is missing, is not JSON or lacks a field
        """
        if not raw:
            raise SessionError("Aucun utilisateur connecté.")
        try:
            return cls.model_validate(json.loads(raw))
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            raise SessionError(f"Session utilisateur invalide : {e}") from e

    @classmethod
    def from_storage(cls, storage: Mapping[str, str]) -> "UserSession":
        return cls.from_serialized(storage.get(SESSION_USER_KEY))
