from datetime import datetime
from typing import Optional, List, Dict, Literal

from pydantic import BaseModel, Field, field_validator

from linguacontent.schemas.user_schema import UserRef


class LanguageOut(BaseModel):
    id: int
    code: str
    name: str
    native_name: str
    rtl: bool

    class Config:
        from_attributes = True


class CategoryOut(BaseModel):
    id: int
    slug: str
    created_at: Optional[datetime] = None
    name: str
    description: Optional[str] = None


class SubjectOut(BaseModel):
    id: int
    slug: str
    category_id: int
    created_at: Optional[datetime] = None
    name: str
    description: Optional[str] = None
    category: CategoryOut


class ArticleOut(BaseModel):
    id: int
    slug: str
    subject_id: int
    author_id: Optional[int] = None
    status: str
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    title: str
    content: str
    notes: Optional[str] = None
    author: Optional[UserRef] = None
    subject: SubjectOut
    like_count: int = 0
    available_languages: List[str] = []


class ArticleTranslationOut(BaseModel):
    id: int
    article_id: int
    language_id: int
    title: str
    content: str
    notes: Optional[str] = None
    language: LanguageOut


class DualViewSide(BaseModel):
    language: LanguageOut
    title: str
    content: str
    notes: Optional[str] = None


class DualViewOut(BaseModel):
    article_id: int
    slug: str
    view_mode: Literal['dual', 'toggle']
    primary: DualViewSide
    secondary: Optional[DualViewSide] = None
    available_languages: List[str]


# Taken by fixed routes under /api/articles/
RESERVED_SLUGS = {"popular"}


class TranslationIn(BaseModel):
    title: str = Field(..., min_length=1, max_length=300)
    content: str = Field(..., min_length=1, max_length=100000)
    notes: Optional[str] = Field(None, max_length=5000)


class ArticleSubmitSchema(BaseModel):
    slug: str = Field(..., min_length=3, max_length=200, pattern=r'^[a-z0-9]+(?:-[a-z0-9]+)*$')
    subject_slug: str = Field(..., min_length=1)
    translations: Dict[str, TranslationIn]

    @field_validator('slug')
    @classmethod
    def validate_slug(cls, value: str) -> str:
        if value in RESERVED_SLUGS:
            raise ValueError(f"Slug '{value}' is reserved")
        return value

    @field_validator('translations')
    @classmethod
    def validate_translations(cls, value: Dict[str, TranslationIn]) -> Dict[str, TranslationIn]:
        if not value:
            raise ValueError("At least one translation is required")
        return value


class ArticleSubmittedOut(BaseModel):
    id: int
    slug: str
    status: str
    languages: List[str]
