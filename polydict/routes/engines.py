"""Engine metadata routes."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from polydict.container import Container, get_container
from polydict.errors import UnknownEngine
from polydict.routes.serializers import engine_to_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/engines", tags=["engines"])


@router.get("")
async def list_engines(container: Container = Depends(get_container)) -> list[dict[str, Any]]:
    """List all registered engines."""
    registry = container.registry
    return [
        engine_to_dict(
            engine_id,
            registry.description_by_id(engine_id),
            registry.feature_set_by_id(engine_id),
        )
        for engine_id in sorted(registry.registered_engine_ids())
    ]


@router.get("/{engine_id}")
async def get_engine(
    engine_id: str,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """Show a single engine."""
    registry = container.registry
    try:
        return engine_to_dict(
            engine_id,
            registry.description_by_id(engine_id),
            registry.feature_set_by_id(engine_id),
        )
    except UnknownEngine:
        raise HTTPException(status_code=404, detail="Engine not found") from None
