"""
admock/main.py

"""


from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
from admock.core.config import Settings, settings as default_settings
from admock.core.database import JsonDatabase
from admock.core.errors import register_error_handlers
from admock.api.v1 import api_router



# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    db: JsonDatabase = app.state.db
    logger.info(f"Serving JSON database {db.path} (seed: {db.initial_path})")
    if not db.path.exists():
        logger.warning(f"{db.path} does not exist yet; POST {app.state.settings.API_PREFIX}/__admin/reset to create it")
    yield
    # Shutdown
    logger.info("Shutting down")


def create_app(settings: Settings = default_settings) -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        lifespan=lifespan,
        debug=settings.DEBUG
    )
    app.state.settings = settings
    app.state.db = JsonDatabase(settings.DB_JSON_FILE, settings.DB_INITIAL_FILE)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)

    register_error_handlers(app)

    @app.get("/")
    async def root():
        return {"message": f"Welcome to {settings.APP_NAME}"}

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


# Create FastAPI app.
app = create_app()
