"""Route handlers for polydict."""

from polydict.routes.dictionaries import router as dictionaries_router
from polydict.routes.engines import router as engines_router
from polydict.routes.query import router as query_router

__all__ = [
    "dictionaries_router",
    "engines_router",
    "query_router",
]
