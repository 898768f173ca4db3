from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from .config import LOG_LEVEL
from .database import make_engine
from .exceptions import SchemaInitError
from .routers import status_router
from .storage import ensure_schema

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """Build the registry service; the schema is reconciled before it serves requests."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db_engine = engine if engine is not None else make_engine()
        app.state.engine = db_engine
        try:
            try:
                app.state.schema_created = ensure_schema(db_engine)
            except SchemaInitError as e:
                logger.error(f"Schema initialization failed, refusing to start: {e}")
                raise
            yield
        finally:
            if engine is None:
                db_engine.dispose()

    app = FastAPI(title="Webhook Registry Service", lifespan=lifespan)
    app.include_router(status_router)
    return app


app = create_app()
