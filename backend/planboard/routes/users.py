"""
Account routes for the Planboard API.
"""

from fastapi import APIRouter, Depends

from planboard.auth import get_current_account
from planboard.models import User
from planboard.schemas import UserRead

router = APIRouter()


@router.get("/me", response_model=UserRead)
async def read_current_user(user: User = Depends(get_current_account)) -> User:
    """The caller's account, registered on first request."""
    return user
