import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.config import Settings, get_settings
from storefront.db import Database
from storefront.errors import register_exception_handlers
from storefront.routers import auth, cart, products

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)
    database = database or Database(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Schema and sample data are in place before the first request
        database.init(seed=settings.SEED_SAMPLE_DATA)
        logger.info("Storefront started")
        yield
        database.dispose()
        logger.info("Storefront stopped")

    app = FastAPI(title="Storefront API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db = database

    # CORS configuration for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    app.include_router(products.router, prefix="/api/products", tags=["products"])
    app.include_router(cart.router, prefix="/api/cart", tags=["cart"])

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")


# --- Entry point for local runs (uvicorn --factory storefront.main:create_app) ---
if __name__ == "__main__":
    import os
    import uvicorn

    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("storefront.main:create_app", factory=True, host="0.0.0.0", port=port, reload=False)
