"""Runs planned query steps against their engines."""

import asyncio
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from polydict.models import Dictionary, GroupingType, OrderType, QueryRequest, QueryStep
from polydict.services.engines.base import DictionaryEntry
from polydict.services.planner import QueryPlanner
from polydict.services.registry import EngineRegistry

logger = logging.getLogger(__name__)


@dataclass
class StepResult:
    """Outcome of one query step."""

    step: QueryStep
    entries: list[DictionaryEntry] = field(default_factory=list)
    error: str | None = None
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


class QueryDispatcher:
    """
    Executes query steps concurrently, one engine call per step.

    A slow or failing engine only affects its own step. Results are returned
    in step order and are not merged.
    """

    def __init__(
        self,
        registry: EngineRegistry,
        planner: QueryPlanner | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.registry = registry
        self.planner = planner or QueryPlanner(registry)
        self.timeout = timeout

    async def execute(self, steps: Sequence[QueryStep]) -> list[StepResult]:
        """Run all steps and collect one StepResult per step."""
        return list(await asyncio.gather(*(self._run_step(step) for step in steps)))

    async def query(
        self,
        query_string: str,
        dictionaries: Sequence[Dictionary],
        grouping: GroupingType = GroupingType.NONE,
        order: OrderType = OrderType.RELEVANCE,
    ) -> tuple[QueryRequest, list[StepResult]]:
        """Plan a query and execute it."""
        request = self.planner.build_request(query_string, dictionaries, grouping, order)
        results = await self.execute(request.steps)
        return request, results

    async def _run_step(self, step: QueryStep) -> StepResult:
        started = time.perf_counter()
        result = StepResult(step=step)
        try:
            engine = self.registry.engine_by_id(step.engine_id)
            entries = await asyncio.wait_for(
                engine.search(
                    step.query_string,
                    step.input_language,
                    step.output_language,
                    step.allow_both_way,
                ),
                timeout=self.timeout,
            )
            result.entries = list(entries or [])
        except asyncio.TimeoutError:
            logger.warning(f"Timeout querying '{step.query_string}' in {step.engine_id}")
            result.error = f"Timed out after {self.timeout:g}s"
        except Exception as e:
            logger.warning(f"Error querying '{step.query_string}' in {step.engine_id}: {e}")
            result.error = str(e) or type(e).__name__
        result.elapsed_ms = (time.perf_counter() - started) * 1000
        return result
