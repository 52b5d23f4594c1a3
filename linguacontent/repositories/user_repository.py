import os
from typing import Optional

from fastapi import HTTPException

from sqlalchemy import select, delete, or_
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from linguacontent.auth.refresh_token_handler import (
    DeleteRefreshTokenRepository, SaveRefreshTokenRepository, token_claims
)
from linguacontent.auth.token_handler import TokenHandler
from linguacontent.models.user_model import UserModel, TokenModel
from linguacontent.schemas.user_schema import UserRegisterSchema, UserLoginSchema
from linguacontent.utils.hash_password import PasswordHash

from linguacontent.logging_config import setup_logger
logger = setup_logger(__name__, "user.log")


def user_payload(user: UserModel) -> dict:
    return {
        'id': user.id,
        'username': user.username,
        'email': user.email,
        'first_name': user.first_name,
        'last_name': user.last_name,
        'role': user.role,
        'is_admin': user.is_admin,
        'created_at': user.created_at,
    }


class RefreshTokenRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def manage_refresh_token(self, user_id: int, refresh_token: str) -> None:
        """Replace whatever refresh tokens the user holds with a single new one."""
        try:
            await self.db.execute(delete(TokenModel).where(TokenModel.user_id == user_id))
            await SaveRefreshTokenRepository(self.db).save_refresh_token(user_id, refresh_token)
        except HTTPException:
            raise
        except Exception as ex:
            logger.error(f'For {user_id}, manage refresh token error {ex}')
            raise HTTPException(status_code=500, detail='Manage refresh token error')


class IssueTokens:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.refresh_token_repo = RefreshTokenRepository(self.db)

    async def issue(self, user: UserModel) -> dict:
        claims = token_claims(user)
        access_token = TokenHandler.generate_access_token(claims)
        refresh_token = TokenHandler.generate_refresh_token(claims)

        await self.refresh_token_repo.manage_refresh_token(user.id, refresh_token)

        return {
            'user': user_payload(user),
            'access_token': access_token,
            'refresh_token': refresh_token,
        }


class UserRegisterRepository:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.h_password = PasswordHash()

    async def register(self, register_data: UserRegisterSchema) -> dict:
        try:
            email = register_data.email.lower()

            # 1 - Check user email is available or not
            data = await self.db.execute(select(UserModel).where(UserModel.email == email))
            if data.scalar():
                raise HTTPException(status_code=409, detail="This email already available")

            # 2 - Check user username is available or not
            data = await self.db.execute(select(UserModel).where(UserModel.username == register_data.username))
            if data.scalar():
                raise HTTPException(status_code=409, detail="This username already available")

            user = UserModel(
                username=register_data.username,
                email=email,
                password=self.h_password.hash_password(register_data.password),
                first_name=register_data.first_name,
                last_name=register_data.last_name,
                role="user",
            )
            self.db.add(user)
            await self.db.commit()
            await self.db.refresh(user)
            logger.info(f'User {user.id} ({user.username}) registered')

            return await IssueTokens(self.db).issue(user)

        except HTTPException:
            raise
        except IntegrityError as ex:
            await self.db.rollback()
            logger.warning(f'Registration conflict for {register_data.username}: {ex}')
            raise HTTPException(status_code=409, detail="This username or email already available")
        except Exception as ex:
            await self.db.rollback()
            logger.error(f'Registration error for {register_data.username}: {ex}')
            raise HTTPException(status_code=500, detail="Registration error")


class CheckUserAvailable:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.h_password = PasswordHash()

    async def check_user_exists(self, login_data: UserLoginSchema) -> UserModel:
        data = await self.db.execute(select(UserModel).where(UserModel.username == login_data.username))
        user = data.scalar()
        if user and self.h_password.verify(user.password, login_data.password):
            return user

        logger.warning(f'Failed login attempt for {login_data.username}')
        raise HTTPException(status_code=401, detail="Invalid username or password")


class UserLoginRepository:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.check_user_available = CheckUserAvailable(self.db)

    async def login(self, login_data: UserLoginSchema) -> dict:
        logger.info(f'{login_data.username} try to login')
        user = await self.check_user_available.check_user_exists(login_data)
        return await IssueTokens(self.db).issue(user)


class UserLogoutRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def logout(self, user_id: int) -> dict:
        """
        Logs out a user by deleting their refresh tokens.

        :param user_id: ID of the user.
        """
        try:
            await DeleteRefreshTokenRepository(self.db).delete_refresh_token(user_id)
            logger.info(f"User {user_id} logged out successfully.")
            return {"message": "Logout successful"}
        except DBAPIError as e:
            logger.error(f"Database error during logout: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error during logout")


class BootstrapAdminRepository:
    """
    Creates or promotes the administrator account named by ADMIN_USERNAME,
    ADMIN_EMAIL and ADMIN_PASSWORD. Does nothing when any of them is unset.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.h_password = PasswordHash()

    async def ensure_admin(self) -> Optional[UserModel]:
        username = os.getenv("ADMIN_USERNAME")
        email = os.getenv("ADMIN_EMAIL")
        password = os.getenv("ADMIN_PASSWORD")
        if not (username and email and password):
            return None

        result = await self.db.execute(
            select(UserModel).where(or_(UserModel.username == username, UserModel.email == email.lower()))
        )
        user = result.scalars().first()

        if user is None:
            user = UserModel(
                username=username,
                email=email.lower(),
                password=self.h_password.hash_password(password),
                role="admin",
            )
            self.db.add(user)
            logger.info(f"Bootstrap admin '{username}' created")
        elif user.role != "admin":
            user.role = "admin"
            logger.info(f"User '{user.username}' promoted to admin")
        else:
            return user

        await self.db.commit()
        await self.db.refresh(user)
        return user
