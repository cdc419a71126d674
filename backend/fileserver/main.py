from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
from .config import Settings, settings as default_settings
from .routes import files
from .services.handler import StaticFileHandler
from .utils.logging import set_level


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        description="Unauthenticated download server for files under a root directory.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    set_level(settings.log_level)
    app.state.file_handler = StaticFileHandler(settings.handler)

    # Must come before the catch-all files route
    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    app.include_router(files.router)

    return app


# ASGI entrypoint (uvicorn: `uvicorn backend.fileserver.main:app`)
app = create_app()


def run():
    uvicorn.run(
        app,
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )
