from sqlalchemy.orm import mapped_column, Mapped
from sqlalchemy import String, Boolean

from linguacontent.models.base_model import Base


class Language(Base):
    __tablename__ = "languages"

    id: Mapped[int] = mapped_column(primary_key=True)
    code: Mapped[str] = mapped_column(String(5), unique=True, index=True)  # en, ar, fr
    name: Mapped[str] = mapped_column(String(50))  # English, Arabic
    native_name: Mapped[str] = mapped_column(String(50))  # English, العربية
    rtl: Mapped[bool] = mapped_column(Boolean, default=False)

    def __repr__(self):
        return f'Language(id:{self.id}, code:{self.code}, rtl:{self.rtl})'
