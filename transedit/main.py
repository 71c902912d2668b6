from fastapi import FastAPI

from transedit.api.status import router as status_router
from transedit.api.translations import router as translations_router
from transedit.config import settings


def create_app() -> FastAPI:
    app = FastAPI(
        title="Transedit",
        version="0.1.0",
        debug=settings.app_debug,
    )

    app.include_router(status_router)
    app.include_router(translations_router)

    return app


app = create_app()
