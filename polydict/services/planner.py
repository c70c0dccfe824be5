"""Query planning: turn a client request into per-engine query steps."""

import logging
from collections.abc import Iterable, Sequence

from polydict.errors import EmptyQuery, NoDictionaries
from polydict.models import (
    Dictionary,
    GroupingType,
    Language,
    OrderType,
    QueryRequest,
    QueryStep,
)
from polydict.services.registry import EngineRegistry

logger = logging.getLogger(__name__)

_Direction = tuple[str, tuple[str, str | None], tuple[str, str | None]]


class QueryPlanner:
    """
    Builds the list of engine calls needed to answer a query.

    Every engine is called at most once per direction. An engine that can
    answer both directions in one call is called once for the pair.
    """

    def __init__(self, registry: EngineRegistry) -> None:
        self.registry = registry

    def plan(
        self,
        query_string: str,
        dictionaries: Sequence[Dictionary],
        grouping: GroupingType = GroupingType.NONE,
        order: OrderType = OrderType.RELEVANCE,
    ) -> list[QueryStep]:
        """
        Plan the engine calls for a query.

        Args:
            query_string: The text to look up
            dictionaries: Requested dictionaries, in the order they should be served
            grouping: Grouping selector for the merge stage (must not be None)
            order: Order selector for the merge stage (must not be None)

        Returns:
            Ordered list of QueryStep without duplicate (engine, direction) pairs.
            Dictionaries without engines contribute nothing.

        Raises:
            EmptyQuery: If the query string is empty
            NoDictionaries: If no dictionaries were requested
        """
        if not query_string or not query_string.strip():
            raise EmptyQuery("Query string may not be empty")
        if not dictionaries:
            raise NoDictionaries("At least one dictionary is required")
        if grouping is None:
            raise ValueError("Grouping type may not be None")
        if order is None:
            raise ValueError("Order type may not be None")

        steps: list[QueryStep] = []
        covered: set[_Direction] = set()

        for dictionary in dictionaries:
            engine_ids = sorted(self.registry.engines_for(dictionary))
            if not engine_ids:
                logger.debug(f"No engines registered for {dictionary}")
                continue

            for engine_id in engine_ids:
                forward = _direction(engine_id, dictionary.input, dictionary.output)
                if forward in covered:
                    continue

                both_ways = self.registry.allows_both_ways(engine_id, dictionary)
                covered.add(forward)
                if both_ways:
                    covered.add(_direction(engine_id, dictionary.output, dictionary.input))

                steps.append(
                    QueryStep(
                        engine_id=engine_id,
                        query_string=query_string,
                        input_language=dictionary.input,
                        output_language=dictionary.output,
                        allow_both_way=both_ways,
                    )
                )

        logger.debug(
            f"Planned {len(steps)} steps for '{query_string}' over {len(dictionaries)} dictionaries"
        )
        return steps

    def build_request(
        self,
        query_string: str,
        dictionaries: Sequence[Dictionary],
        grouping: GroupingType = GroupingType.NONE,
        order: OrderType = OrderType.RELEVANCE,
    ) -> QueryRequest:
        """Plan a query and bundle the steps with the merge selectors."""
        steps = self.plan(query_string, dictionaries, grouping, order)
        return QueryRequest(
            query_string=query_string,
            dictionaries=tuple(dictionaries),
            grouping=grouping,
            order=order,
            steps=tuple(steps),
        )

    def resolve_dictionaries(self, query_strings: Iterable[str]) -> list[Dictionary]:
        """
        Look up dictionaries from query strings such as "de-en".

        The one-way form is preferred; the bidirectional form is the fallback.
        Unknown dictionaries are skipped.

        Raises:
            InvalidDictionaryQuery: If a query string is malformed
        """
        catalog = self.registry.catalog
        resolved: list[Dictionary] = []
        for query_string in query_strings:
            for part in query_string.split(","):
                part = part.strip()
                if not part:
                    continue
                dictionary = catalog.dictionary_from_query_string(part)
                if dictionary is None:
                    dictionary = catalog.dictionary_from_query_string(part, bidirectional=True)
                if dictionary is None:
                    logger.debug(f"Skipping unknown dictionary '{part}'")
                    continue
                if dictionary not in resolved:
                    resolved.append(dictionary)
        return resolved


def _direction(engine_id: str, source: Language, target: Language) -> _Direction:
    return engine_id, source.key, target.key
