# routers/health.py
from fastapi import APIRouter

from bank import template_counts
from config import MAX_ATTEMPTS, MAX_RECENT

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/templates")
def health_templates():
    counts = template_counts()
    ok = all(n > 0 for per_type in counts.values() for n in per_type.values())
    return {
        "ok": ok,
        "templates": counts,
        "max_recent": MAX_RECENT,
        "max_attempts": MAX_ATTEMPTS,
    }
