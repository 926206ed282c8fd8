# src/weather_widget/server.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weather_widget.api import health, weather
from weather_widget.utils.logger import setup_logging


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title="Weather Widget API")

    # ============================================================
    # CORS (widget front-ends in local development)
    # ============================================================
    allowed_origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # ============================================================
    # Routers
    # ============================================================
    app.include_router(weather.router, prefix="/api")
    app.include_router(health.router)

    return app


app = create_app()
