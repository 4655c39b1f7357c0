from sealedforge.api.daily import router as daily_router
from sealedforge.api.health import router as health_router
from sealedforge.api.sets import router as sets_router

__all__ = [
    "daily_router",
    "health_router",
    "sets_router",
]
