from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sealedforge.api import daily_router, health_router, sets_router
from sealedforge.config import settings

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("sealedforge"),
    debug=settings.debug,
)

app.include_router(daily_router)
app.include_router(health_router)
app.include_router(sets_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)
