"""Bridge from synchronous CLI commands to the async dispatcher."""

import asyncio
from collections.abc import Sequence

from polydict.container import Container
from polydict.models import Dictionary, GroupingType, OrderType, QueryRequest
from polydict.services.dispatcher import StepResult


def dispatch_query(
    container: Container,
    query: str,
    dictionaries: Sequence[Dictionary],
    grouping: GroupingType | None = None,
    order: OrderType | None = None,
) -> tuple[QueryRequest, list[StepResult]]:
    """Plan and run a query on a fresh event loop.

    Missing grouping and order fall back to the configured defaults.
    """
    return asyncio.run(
        container.dispatcher.query(
            query,
            dictionaries,
            grouping or container.settings.default_grouping,
            order or container.settings.default_order,
        )
    )
