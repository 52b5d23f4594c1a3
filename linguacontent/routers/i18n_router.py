from fastapi import APIRouter, HTTPException

from linguacontent.i18n.service import i18n

router = APIRouter()


@router.get('/{lang}', status_code=200)
async def get_strings(lang: str):
    if not i18n.is_supported(lang):
        raise HTTPException(status_code=404, detail="Language not found")

    code = lang.lower()
    return {
        "language": code,
        "rtl": i18n.is_rtl(code),
        "strings": i18n.get_strings(code),
    }
