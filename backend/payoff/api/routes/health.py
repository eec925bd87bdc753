from fastapi import APIRouter

from payoff.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "version": "0.1.0",
        "max_months": settings.MAX_MONTHS,
    }
