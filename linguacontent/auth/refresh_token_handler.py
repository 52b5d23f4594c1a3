from datetime import datetime, timezone

from fastapi import Request, HTTPException

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from linguacontent.auth.token_handler import TokenHandler, refresh_token_lifetime

from linguacontent.models.user_model import TokenModel, UserModel

from linguacontent.logging_config import setup_logger
user_logger = setup_logger(__name__, "user.log")


def token_claims(user: UserModel) -> dict:
    return {
        'sub': str(user.id),
        'username': user.username,
        'role': user.role,
    }


class VerifyRefreshTokenMiddleware:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def validate_refresh_token(self, request: Request) -> dict:

        refresh_token = request.cookies.get('refresh_token')

        if not refresh_token:
            user_logger.warning("Refresh requested without a refresh token cookie")
            raise HTTPException(status_code=401, detail="Please login before executing")

        payload = TokenHandler.verify_refresh_token(refresh_token)

        try:
            # The token must still be on record, logout and rotation revoke it
            user_id = await SearchRefreshTokenRepository(self.db).search_refresh_token(refresh_token)
            if user_id is None or str(user_id) != payload['sub']:
                raise HTTPException(status_code=401, detail="Invalid or revoked refresh token")

            user = await self.db.get(UserModel, user_id)
            if user is None:
                raise HTTPException(status_code=401, detail="Invalid or revoked refresh token")

            claims = token_claims(user)
            access_token = TokenHandler.generate_access_token(claims)
            new_refresh_token = TokenHandler.generate_refresh_token(claims)

            await UpdateRefreshTokenRepository(self.db).update_refresh_token(user.id, refresh_token, new_refresh_token)

            user_logger.info(f"New tokens issued for user: {user.id}")

            return {
                'access_token': access_token,
                'refresh_token': new_refresh_token,
                'user': claims
            }

        except HTTPException:
            raise
        except Exception as e:
            user_logger.error(f"Unexpected error validating refresh token: {str(e)}", exc_info=True)
            raise HTTPException(status_code=500, detail="An error occurred while validating the refresh token")


class SaveRefreshTokenRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def save_refresh_token(self, user_id: int, refresh_token: str) -> None:
        """
        Saves a refresh token for a user.

        :param user_id: ID of the user.
        :param refresh_token: Refresh token to save.
        """
        try:
            self.db.add(TokenModel(
                user_id=user_id,
                tokens=refresh_token,
                expires_at=datetime.now(timezone.utc) + refresh_token_lifetime(),
            ))
            await self.db.commit()
            user_logger.info(f"Refresh token saved for user: {user_id}")
        except Exception as e:
            await self.db.rollback()
            user_logger.error(f"Error saving refresh token: {str(e)}")
            raise HTTPException(status_code=500, detail="Refresh token can't be saved")


class UpdateRefreshTokenRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def update_refresh_token(self, user_id: int, old_token: str, refresh_token: str) -> None:
        """
        Replaces one refresh token of a user with a freshly issued one.

        :param user_id: ID of the user.
        :param old_token: Token being rotated out.
        :param refresh_token: Refresh token to store.
        """
        try:
            await self.db.execute(
                delete(TokenModel).where(TokenModel.user_id == user_id, TokenModel.tokens == old_token)
            )
            self.db.add(TokenModel(
                user_id=user_id,
                tokens=refresh_token,
                expires_at=datetime.now(timezone.utc) + refresh_token_lifetime(),
            ))
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            user_logger.error(f"Error updating refresh token: {str(e)}")
            raise HTTPException(status_code=500, detail="Error updating refresh token")


class DeleteRefreshTokenRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def delete_refresh_token(self, user_id: int) -> None:

        try:
            await self.db.execute(
                delete(TokenModel).where(TokenModel.user_id == user_id)
            )
            await self.db.commit()
            user_logger.info(f"Refresh token deleted for user {user_id}.")
        except Exception as e:
            await self.db.rollback()
            user_logger.error(f"Error deleting refresh token for user {user_id}: {str(e)}")
            raise


class SearchRefreshTokenRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def search_refresh_token(self, refresh_token: str):

        try:
            token = await self.db.execute(
                select(TokenModel).where(TokenModel.tokens == refresh_token)
            )

            token = token.scalar()
            if token:
                return token.user_id
            else:
                return None

        except Exception as e:
            user_logger.error(f"Error searching refresh token: {str(e)}")
            raise


class PurgeExpiredTokensRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def purge_expired_tokens(self) -> int:
        """Delete every refresh token past its expiry. Returns the number removed."""
        try:
            result = await self.db.execute(
                delete(TokenModel).where(TokenModel.expires_at < datetime.now(timezone.utc))
            )
            await self.db.commit()
            return result.rowcount or 0
        except Exception as e:
            await self.db.rollback()
            user_logger.error(f"Error purging expired refresh tokens: {str(e)}")
            raise
