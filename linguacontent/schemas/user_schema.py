from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator, Field


COMMON_PASSWORDS = {"password", "12345678", "qwertyui", "11111111"}


def _check_password(value: str) -> str:
    if len(value.strip()) < 8:
        raise ValueError("Password too short (min 8 chars)")
    if value.lower() in COMMON_PASSWORDS:
        raise ValueError("Password too common")
    if ' ' in value:
        raise ValueError("Password can't contain space")
    return value


class UserRegisterSchema(BaseModel):

    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)

    @field_validator('username')
    @classmethod
    def validate_username(cls, value: str) -> str:
        value = value.strip()
        if ' ' in value:
            raise ValueError("Username can't contain space")
        return value

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password(value)


class UserLoginSchema(BaseModel):

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserOut(BaseModel):
    id: int
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: str
    is_admin: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserRef(BaseModel):
    id: int
    username: str


class MessageCreateSchema(BaseModel):
    content: str = Field(..., min_length=1, max_length=2000)


class MessageOut(BaseModel):
    id: int
    user_id: int
    content: str
    created_at: Optional[datetime] = None
    user: UserRef
