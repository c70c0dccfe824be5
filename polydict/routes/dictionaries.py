"""Dictionary listing routes."""

from typing import Any

from fastapi import APIRouter, Depends

from polydict.container import Container, get_container
from polydict.routes.serializers import dictionary_to_dict

router = APIRouter(prefix="/api/dictionaries", tags=["dictionaries"])


@router.get("")
async def list_dictionaries(
    bidirectional: bool | None = None,
    container: Container = Depends(get_container),
) -> list[dict[str, Any]]:
    """List every dictionary some engine serves, optionally only (non-)bidirectional ones."""
    dictionaries = container.registry.supported_dictionaries()
    if bidirectional is not None:
        dictionaries = frozenset(d for d in dictionaries if d.bidirectional == bidirectional)
    return [dictionary_to_dict(d) for d in sorted(dictionaries, key=lambda d: d.key)]
