import logging
from typing import Annotated, Optional

from fastapi import Depends, Header

from src.store.service import StoreService, get_store_service
from src.users.schemas import UserSession

# Logger for this module
logger = logging.getLogger(__name__)

async def get_current_session(
    x_user: Annotated[Optional[str], Header(alias="X-User")] = None
) -> UserSession:
    """
    Dependency to get the current user session.

    The front-end forwards the ``user`` record from its local storage in the
    ``X-User`` header (serialized ``{"type": ..., "email": ...}``).

    Raises:
        SessionError: If the header is missing or unparsable (mapped to 401)
    """
    session = UserSession.from_serialized(x_user)
    logger.debug(f"Session resolved for {session.email}")
    return session

# Type aliases for easier use in route handlers
CurrentSession = Annotated[UserSession, Depends(get_current_session)]
StoreDependency = Annotated[StoreService, Depends(get_store_service)]
