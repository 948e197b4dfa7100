# furniro/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .catalog import CatalogStore, catalog_router
from .config import Settings
from .errors import CatalogError

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application.

    The ``CatalogStore`` is created when the app starts (lifespan) and
    cleared when it stops; routes reach it through ``app.state.store``.
    """
    settings = settings or Settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = CatalogStore.with_sample_data() if settings.seed else CatalogStore()
        app.state.store = store
        logger.info(
            "catalog store ready: %d products, %d blog posts",
            len(store.list_products()),
            len(store.list_blog_posts()),
        )
        try:
            yield
        finally:
            store.close()
            logger.info("catalog store closed")

    app = FastAPI(
        title="Furniro Catalog API",
        description="In-memory product and blog catalogue for the Furniro storefront.",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        fields = [".".join(str(p) for p in err.get("loc", ())[1:]) for err in exc.errors()]
        logger.warning("rejected %s %s: invalid %s", request.method, request.url.path, fields)
        message = "Invalid request body"
        if any(fields):
            message = f"Invalid request body: {', '.join(f for f in fields if f)}"
        return JSONResponse(status_code=400, content={"message": message})

    @app.get("/")
    def health_check():
        return {"status": "ok", "message": "Furniro catalog API running"}

    app.include_router(catalog_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = Settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
