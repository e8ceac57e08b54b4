import logging
import uvicorn
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import state
from core.config import Settings
from services.workspace import MapWorkspace
from services.zones_store import ZoneIndex
from api.routes import events, health, polygons, workspace, ws, zones


def create_app() -> FastAPI:
    settings = Settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # --- startup ---
        state.stop_flag = False
        state.workspace = MapWorkspace(
            ZoneIndex.from_file(Path(settings.ZONES_PATH)),
            building_height=settings.DEFAULT_BUILDING_HEIGHT,
            events_max=settings.EVENTS_MAX,
        )
        try:
            yield
        finally:
            # --- shutdown ---
            state.stop_flag = True

    app = FastAPI(title="ZonePlot API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(workspace.router)
    app.include_router(polygons.router)
    app.include_router(zones.router)
    app.include_router(events.router)
    app.include_router(health.router)
    app.include_router(ws.router)

    return app


app = create_app()


def run() -> None:
    settings = Settings()
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
