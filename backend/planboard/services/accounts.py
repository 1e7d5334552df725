"""
Local user accounts backed by Firebase identities.

A user row is created the first time a verified identity calls the API.
Emails are unique: an email already linked to another Firebase uid is a
conflict, not a silent re-link.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from planboard.exceptions import AccountConflictError
from planboard.logging_config import get_logger
from planboard.models import User

logger = get_logger(__name__)


def default_display_name(email: str) -> str:
    """Display name derived from the email's local part."""
    return email.split("@", 1)[0] or email


async def _find_by_uid(session: AsyncSession, firebase_uid: str) -> User | None:
    result = await session.execute(select(User).where(User.firebase_uid == firebase_uid))
    return result.scalars().first()


async def get_or_create_user(
    session: AsyncSession,
    firebase_uid: str,
    email: str,
    name: str | None = None,
) -> User:
    """
    Return the user for a Firebase uid, registering it on first sight.

    Must run before any other write in the session: a lost registration
    race rolls the session back and re-reads the winner's row.

    Raises:
        AccountConflictError: the email belongs to a different uid.
    """
    user = await _find_by_uid(session, firebase_uid)
    if user is not None:
        return user

    result = await session.execute(select(User).where(User.email == email))
    if result.scalars().first() is not None:
        logger.warning(f"Registration conflict: {email} is linked to another uid (new uid={firebase_uid})")
        raise AccountConflictError(email)

    user = User(
        firebase_uid=firebase_uid,
        email=email,
        name=(name or default_display_name(email))[:100],
    )
    session.add(user)
    try:
        await session.flush()
    except IntegrityError:
        # Another request registered the same uid (or email) concurrently
        await session.rollback()
        existing = await _find_by_uid(session, firebase_uid)
        if existing is None:
            raise AccountConflictError(email)
        return existing

    await session.refresh(user)

    logger.info(f"Registered user: id={user.id} email='{user.email}'")

    return user
