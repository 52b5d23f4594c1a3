from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request

from fastapi.responses import Response

from sqlalchemy.ext.asyncio import AsyncSession

from linguacontent.auth.dependencies import get_current_user
from linguacontent.auth.refresh_token_handler import VerifyRefreshTokenMiddleware
from linguacontent.database.setup import get_db
from linguacontent.models.user_model import UserModel
from linguacontent.repositories.admin_repository import MessageRepository
from linguacontent.repositories.user_repository import (
    UserRegisterRepository, UserLoginRepository, UserLogoutRepository, user_payload
)
from linguacontent.schemas.user_schema import (
    UserRegisterSchema, UserLoginSchema, UserOut, MessageCreateSchema, MessageOut
)

from linguacontent.logging_config import setup_logger
logger = setup_logger(__name__, "user.log")

router = APIRouter()


def set_auth_headers(response: Response, refresh_token: str) -> None:
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"

    response.set_cookie('refresh_token', refresh_token,
                        httponly=True,
                        secure=True,
                        samesite="none"
                        )


@router.post('/register', status_code=201)
async def register(response: Response, register_data: UserRegisterSchema,
                   db_session: Annotated[AsyncSession, Depends(get_db)]):
    repository = UserRegisterRepository(db_session)

    try:
        data = await repository.register(register_data)
        set_auth_headers(response, data.get('refresh_token'))

        return {
            'user': data.get('user'),
            'access_token': data.get('access_token')
        }

    except HTTPException as ex:
        raise ex
    except Exception as ex:
        logger.exception("Unexpected error registering user: %s", ex)
        raise HTTPException(500, 'Internal server error')


@router.post('/login', status_code=200)
async def login(response: Response, login_data: UserLoginSchema,
                db_session: Annotated[AsyncSession, Depends(get_db)]):
    repository = UserLoginRepository(db_session)

    try:
        data = await repository.login(login_data)
        set_auth_headers(response, data.get('refresh_token'))

        return {
            'user': data.get('user'),
            'access_token': data.get('access_token')
        }

    except HTTPException as ex:
        raise ex
    except Exception as ex:
        logger.exception("Unexpected error login user: %s", ex)
        raise HTTPException(500, 'Internal server error')


@router.post("/refresh", status_code=200)
async def refresh_token(response: Response, request: Request, db: AsyncSession = Depends(get_db)):

    middleware = VerifyRefreshTokenMiddleware(db)
    try:
        user_info = await middleware.validate_refresh_token(request)
        set_auth_headers(response, user_info.get('refresh_token'))

        return {
            "access_token": user_info.get("access_token"),
            "user": user_info.get('user'),
        }

    except HTTPException as e:
        logger.warning(f"Error refreshing token: {e.detail}")
        raise
    except Exception as e:
        logger.error(f"Unexpected error refreshing token: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred while refreshing the token")


@router.post('/logout', status_code=200)
async def logout(
    response: Response,
    user: Annotated[UserModel, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db)
):
    try:
        result = await UserLogoutRepository(db).logout(user.id)
        response.delete_cookie(key="refresh_token", httponly=True, secure=True, samesite="none")
        return result
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error during logout: {str(e)}")
        raise HTTPException(status_code=500, detail="An error occurred during logout")


@router.get('/user', status_code=200, response_model=UserOut)
async def get_user(user: Annotated[UserModel, Depends(get_current_user)]):
    return user_payload(user)


@router.post('/messages', status_code=201, response_model=MessageOut)
async def send_message(data: MessageCreateSchema,
                       user: Annotated[UserModel, Depends(get_current_user)],
                       db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        return await MessageRepository(db).create_message(user, data.content)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error sending message for user {user.id}: {ex}")
        raise HTTPException(status_code=500, detail="Failed to send message")
