"""
Firebase authentication for FastAPI.

Verifies Firebase ID tokens and maps the identity to a local User row.
Routes receive the user explicitly through dependencies; nothing downstream
reads ambient request state.
"""

import os
from pathlib import Path
import firebase_admin
from firebase_admin import auth, credentials, exceptions as firebase_exceptions
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from planboard.config import get_settings
from planboard.database import get_session
from planboard.logging_config import get_logger
from planboard.models import User
from planboard.services.accounts import get_or_create_user

logger = get_logger(__name__)


def _credential_paths() -> list[Path]:
    """Candidate service account key files, most specific first."""
    settings = get_settings()
    # __file__ = backend/planboard/auth.py -> .parent.parent = backend/
    backend_dir = Path(__file__).parent.parent

    paths = []
    if settings.firebase_credentials_path:
        paths.append(Path(settings.firebase_credentials_path))

    env_path = os.environ.get("GOOGLE_APPLICATION_CREDENTIALS", "")
    if env_path:
        paths.append(Path(env_path))

    paths.append(backend_dir / "serviceAccountKey.json")
    # Firebase's default naming pattern: *-firebase-adminsdk-*.json
    paths.extend(backend_dir.glob("*-firebase-adminsdk-*.json"))
    return paths


def init_firebase() -> None:
    """Initialize the Firebase Admin SDK once per process."""
    try:
        firebase_admin.get_app()
        return  # Already initialized
    except ValueError:
        pass

    for key_path in _credential_paths():
        if key_path.exists() and key_path.is_file():
            cred = credentials.Certificate(str(key_path))
            firebase_admin.initialize_app(cred)
            logger.info(f"Firebase Admin SDK initialized with: {key_path.name}")
            return

    logger.warning("No Firebase service account key found! Token verification may fail.")
    firebase_admin.initialize_app()
    logger.info("Firebase Admin SDK initialized without credentials")


security = HTTPBearer()


class AuthenticatedUser:
    """Identity verified from a Firebase ID token."""

    def __init__(self, uid: str, email: str | None, name: str | None):
        self.uid = uid
        self.email = email
        self.name = name

    def __repr__(self):
        return f"AuthenticatedUser(uid={self.uid}, email={self.email})"


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> AuthenticatedUser:
    """
    Verify the bearer token and return the Firebase identity.

    Raises:
        HTTPException: 401 if the token is invalid or expired.
    """
    init_firebase()

    try:
        decoded_token = auth.verify_id_token(credentials.credentials)
    except auth.ExpiredIdTokenError:
        logger.warning("Expired Firebase token")
        raise _unauthorized("Token has expired")
    except auth.InvalidIdTokenError:
        logger.warning("Invalid Firebase token")
        raise _unauthorized("Invalid authentication token")
    except (ValueError, firebase_exceptions.FirebaseError) as e:
        logger.error(f"Authentication error: {e}")
        raise _unauthorized("Authentication failed")

    uid = decoded_token["uid"]
    logger.debug(f"Authenticated user: {uid} ({decoded_token.get('email')})")

    return AuthenticatedUser(
        uid=uid,
        email=decoded_token.get("email"),
        name=decoded_token.get("name"),
    )


async def get_current_account(
    identity: AuthenticatedUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> User:
    """Local account for the authenticated identity (created on first use)."""
    if not identity.email:
        raise _unauthorized("Account has no email address")

    return await get_or_create_user(
        session,
        firebase_uid=identity.uid,
        email=identity.email,
        name=identity.name,
    )
