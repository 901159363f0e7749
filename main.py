from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from core.config_loader import settings
from core.logging_config import setup_logging

from shift.router import shift_router
from scheduling.router import scheduling_router
import models_bootstrap

setup_logging()

openapi_tags = [
    {
        "name": "Scheduling",
        "description": "Generate, publish and audit weekly schedules",
    },
    {
        "name": "Shifts",
        "description": "Manual shift entry and conflict checks",
    },
    {
        "name": "Health Checks",
        "description": "Application health checks",
    }
]

app = FastAPI(title="RotaPlan", openapi_tags=openapi_tags)

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            str(origin).strip("/") for origin in settings.BACKEND_CORS_ORIGINS
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(scheduling_router, prefix="/api")
app.include_router(shift_router, prefix="/api")


@app.get("/health", tags=['Health Checks'])
def read_root():
    return {"health": "true"}
