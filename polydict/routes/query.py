"""Query planning and execution routes."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from polydict.container import Container, get_container
from polydict.errors import PolydictError
from polydict.models import Dictionary, GroupingType, OrderType
from polydict.routes.serializers import request_to_dict, result_to_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["query"])


def _resolve(container: Container, dictionaries: list[str]) -> list[Dictionary]:
    try:
        return container.planner.resolve_dictionaries(dictionaries)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None


@router.get("/plan")
async def plan_query(
    q: str = "",
    dictionaries: list[str] = Query([]),
    grouping: GroupingType | None = None,
    order: OrderType | None = None,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """Show which engine calls a query would make."""
    resolved = _resolve(container, dictionaries)
    try:
        request = container.planner.build_request(
            q,
            resolved,
            grouping or container.settings.default_grouping,
            order or container.settings.default_order,
        )
    except PolydictError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    return request_to_dict(request)


@router.get("/query")
async def run_query(
    q: str = "",
    dictionaries: list[str] = Query([]),
    grouping: GroupingType | None = None,
    order: OrderType | None = None,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """Plan a query and run it against the engines; results are per step, unmerged."""
    resolved = _resolve(container, dictionaries)
    try:
        request, results = await container.dispatcher.query(
            q,
            resolved,
            grouping or container.settings.default_grouping,
            order or container.settings.default_order,
        )
    except PolydictError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None

    failed = sum(1 for result in results if not result.ok)
    if failed:
        logger.info(f"{failed} of {len(results)} steps failed for '{q}'")
    return {
        "request": request_to_dict(request),
        "results": [result_to_dict(result) for result in results],
    }
