"""Session lookup + ownership check shared by session command handlers."""

from pantry.domain.shopping.entities import ShoppingSession
from pantry.domain.shopping.exceptions import SessionAccessDeniedError, ShoppingSessionNotFoundError
from pantry.domain.shopping.repositories import ShoppingSessionRepository
from pantry.domain.shopping.value_objects import ShoppingSessionId


async def load_owned_session(
    repository: ShoppingSessionRepository,
    session_id: ShoppingSessionId,
    owner_id: str,
) -> ShoppingSession:
    """Load session and verify the caller owns it.

    Raises:
        ShoppingSessionNotFoundError: Session не існує.
        SessionAccessDeniedError: Session належить іншому користувачу.
    """
    session = await repository.find_by_id(session_id)
    if session is None:
        raise ShoppingSessionNotFoundError(session_id=str(session_id))
    if not session.is_owned_by(owner_id):
        raise SessionAccessDeniedError(session_id=str(session_id))
    return session
