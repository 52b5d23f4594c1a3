from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, Field

from linguacontent.schemas.user_schema import UserRef


class CommentBody(BaseModel):
    content: str = Field(..., min_length=1, max_length=1000)
    parent_id: Optional[int] = Field(None, gt=0)


class CommentCreateSchema(CommentBody):
    article_id: int = Field(..., gt=0)


class CommentOut(BaseModel):
    id: int
    article_id: int
    user_id: int
    content: str
    parent_id: Optional[int] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CommentWithUserOut(CommentOut):
    user: UserRef
    replies: List["CommentWithUserOut"] = []


CommentWithUserOut.model_rebuild()


class ArticleActionSchema(BaseModel):
    article_id: int = Field(..., gt=0)


class LikeOut(BaseModel):
    id: int
    article_id: int
    user_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SavedArticleOut(LikeOut):
    pass


class LikeStatusOut(BaseModel):
    liked: bool
    like_count: int


class SaveStatusOut(BaseModel):
    saved: bool
