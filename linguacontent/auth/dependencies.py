from typing import Optional

from fastapi import Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from linguacontent.auth.token_handler import TokenHandler
from linguacontent.database.setup import get_db
from linguacontent.models.user_model import UserModel


async def get_current_user(
    user_info: dict = Depends(TokenHandler.verify_access_token),
    db: AsyncSession = Depends(get_db),
) -> UserModel:
    """Resolve the bearer token to a user row, 401 when the user is gone."""
    try:
        user_id = int(user_info.get('sub'))
    except (TypeError, ValueError):
        raise HTTPException(status_code=401, detail="Unauthorized")

    user = await db.get(UserModel, user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user


async def get_optional_user(
    user_info: Optional[dict] = Depends(TokenHandler.optional_access_token),
    db: AsyncSession = Depends(get_db),
) -> Optional[UserModel]:
    if not user_info:
        return None
    try:
        return await db.get(UserModel, int(user_info.get('sub')))
    except (TypeError, ValueError):
        return None


async def require_admin(user: UserModel = Depends(get_current_user)) -> UserModel:
    if not user.is_admin:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user
