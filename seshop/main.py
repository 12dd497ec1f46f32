from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI

from seshop.core.config import Settings, get_settings
from seshop.core.errors import register_exception_handlers
from seshop.database import Database

# Import models so SQLModel metadata is populated before create_all()
from seshop.models import user as _user_models  # noqa: F401
from seshop.models import product as _product_models  # noqa: F401
from seshop.models import cart as _cart_models  # noqa: F401

# Routers
from seshop.routers.users import router as users_router
from seshop.routers.products import router as products_router
from seshop.routers.cart import router as cart_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Open the database handle and create tables.

    Shutdown:
      - Dispose of the engine's connection pool.
    """
    db = Database.from_settings(app.state.settings)
    logger.info("🔄 Startup: Connecting to database...")
    try:
        db.create_tables()
        logger.info("✅ Startup: DB connection OK, tables verified.")
    except Exception as e:
        logger.error(f"❌ Startup: DB connection FAILED: {e}")
        db.dispose()
        raise
    app.state.db = db
    yield
    db.dispose()
    logger.info("👋 Shutdown: DB connections closed.")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the API.

    `settings` defaults to the environment-backed `get_settings()`; tests pass
    their own to point at a throwaway database.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="RESTful API for SE Shop: products, carts and users.",
        version="1.0.0",
        docs_url=settings.DOCS_URL,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # --- CORS configuration ---
    if settings.CLIENT_URL:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[settings.CLIENT_URL],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(products_router)
    app.include_router(cart_router)
    app.include_router(users_router)

    @app.get("/")
    def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "se-shop"}

    return app


app = create_app()
