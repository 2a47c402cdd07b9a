from typing import Optional

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from song_browser.core.config import Config, load_config

from .deps import get_config
from .schemas import HealthResponse


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Build the API: materials file server, catalog queries and a health probe.

    Every request handler sees `config` through the get_config dependency.
    uvicorn calls this as an app factory (see `song-browser serve`).
    """
    config = config or load_config()

    app = FastAPI(title="School of Uke Song Browser API", version="1.0.0")
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.web.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    from web.backend.routers import materials, songs

    app.include_router(
        materials.router,
        prefix=config.materials.url_prefix.rstrip("/"),
        tags=["materials"],
    )
    app.include_router(songs.router, prefix="/api", tags=["songs"])

    @app.get("/health", response_model=HealthResponse)
    async def health_check(config: Config = Depends(get_config)):
        return HealthResponse(status="ok", materialsPath=config.materials.root_dir)

    return app
