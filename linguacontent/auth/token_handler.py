import os
from datetime import datetime, timezone, timedelta
from typing import Optional

from fastapi.requests import Request

import jwt
from jwt.exceptions import InvalidTokenError

from fastapi import HTTPException

from linguacontent.logging_config import setup_logger
logger = setup_logger(__name__, "session.log")


def _algorithm() -> str:
    return os.getenv('JWT_ALGORITHM', 'HS256')


def access_token_lifetime() -> timedelta:
    return timedelta(days=int(os.getenv('ACCESS_TOKEN_DAYS', '2')))


def refresh_token_lifetime() -> timedelta:
    return timedelta(days=int(os.getenv('REFRESH_TOKEN_DAYS', '30')))


class TokenHandler:

    @staticmethod
    def generate_access_token(user_data: dict) -> str:
        try:
            encode = user_data.copy()
            encode.update({"exp": datetime.now(timezone.utc) + access_token_lifetime()})
            secret_key = os.getenv('JWT_SECRET_KEY')
            access_token = jwt.encode(encode, secret_key, _algorithm())
            return access_token
        except Exception as ex:
            logger.error(f"Failed to create new access token {ex}")
            raise HTTPException(status_code=500, detail="Failed to create new access token")

    @staticmethod
    def generate_refresh_token(user_data: dict) -> str:
        try:
            encode = user_data.copy()
            now = datetime.now(timezone.utc)
            # jti keeps refresh tokens issued within the same second distinct
            encode.update({"exp": now + refresh_token_lifetime(), "iat": now, "jti": os.urandom(8).hex()})
            secret_key = os.getenv('JWT_REFRESH_SECRET_KEY')
            refresh_token = jwt.encode(encode, secret_key, _algorithm())
            return refresh_token

        except Exception as ex:
            logger.error(f"Failed to create new refresh token {ex}")
            raise HTTPException(status_code=500, detail="Failed to create new refresh token")

    @staticmethod
    def _decode_bearer(req: Request) -> Optional[dict]:
        header = req.headers.get('Authorization')
        if not header:
            return None

        parts = header.split(' ')
        if len(parts) != 2 or parts[0].lower() != 'bearer' or not parts[1]:
            raise HTTPException(status_code=401, detail='Authorization Error')

        try:
            secret_key = os.getenv('JWT_SECRET_KEY')
            return jwt.decode(parts[1], secret_key, algorithms=[_algorithm()])
        except InvalidTokenError as ex:
            raise HTTPException(status_code=401, detail=f'Authorization Error {ex}')

    @staticmethod
    def verify_access_token(req: Request) -> dict:
        payload = TokenHandler._decode_bearer(req)
        if not payload:
            raise HTTPException(status_code=401, detail='Unauthorized')
        return payload

    @staticmethod
    def optional_access_token(req: Request) -> Optional[dict]:
        """
        Same as verify_access_token, but anonymous requests get None instead
        of a 401. A malformed or expired token is still rejected.
        """
        return TokenHandler._decode_bearer(req)

    @staticmethod
    def verify_refresh_token(refresh_token: str) -> dict:
        """
        Verify and decode a refresh token.

        :param refresh_token: The refresh token to verify
        :return: Decoded token payload if valid
        :raises HTTPException: If token is invalid or expired
        """
        if not refresh_token:
            raise HTTPException(status_code=401, detail="Refresh token is required")

        secret_key = os.getenv('JWT_REFRESH_SECRET_KEY')
        if not secret_key:
            logger.error("JWT secrets not configured")
            raise HTTPException(status_code=500, detail="Server configuration error")

        try:
            payload = jwt.decode(refresh_token, secret_key, algorithms=[_algorithm()])
        except jwt.ExpiredSignatureError:
            logger.warning("Refresh token expired")
            raise HTTPException(status_code=401, detail="Refresh token expired")
        except jwt.InvalidTokenError as e:
            logger.warning(f"Invalid refresh token: {str(e)}")
            raise HTTPException(status_code=401, detail="Invalid refresh token")

        if 'sub' not in payload:
            raise HTTPException(status_code=401, detail="Invalid token: missing subject")

        logger.info(f"Successfully verified refresh token for user: {payload.get('sub')}")
        return payload
