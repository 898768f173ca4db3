# webhook_registry/routers/__init__.py
from .status import router as status_router

__all__ = ["status_router"]
