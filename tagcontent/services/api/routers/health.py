# tagcontent/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter
from tagcontent.common.settings import get_settings

router = APIRouter()

@router.get("/healthz")
def healthz():
    """Liveness plus the resolution settings this process is running with."""
    s = get_settings()
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "default_language": s.resolution.default_language,
        "primary_image_tag": s.resolution.primary_image_tag,
        "platform_configured": bool(s.platform.store_id),
        "translation_enabled": s.translation.enabled,
    }
