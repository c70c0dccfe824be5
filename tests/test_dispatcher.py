"""Tests for the query dispatcher."""

import asyncio
from unittest.mock import AsyncMock

import pytest
from helpers import FakeEngine, register

from polydict.models import QueryStep
from polydict.services.dispatcher import QueryDispatcher, StepResult
from polydict.services.engines.base import DictionaryEntry


class SlowEngine(FakeEngine):
    async def search(self, query, input_language, output_language, allow_both_way=False):
        await asyncio.sleep(5)
        return []


class TestQueryDispatcher:
    """Tests for QueryDispatcher."""

    @pytest.mark.asyncio
    async def test_executes_each_step(self, registry, catalog, german, english):
        """Should call the engine once per step with the step's direction."""
        de_en = catalog.dictionary(german, english, True)
        entry = DictionaryEntry("Haus", "house", german, english, source="E")
        engine = FakeEngine([de_en], entries=[entry])
        register(registry, "E", [de_en], engine=engine)
        dispatcher = QueryDispatcher(registry)

        request, results = await dispatcher.query("Haus", [catalog.one_way(de_en)])

        assert len(request.steps) == 1
        assert engine.calls == [("Haus", german, english, True)]
        assert results[0].ok is True
        assert results[0].entries == [entry]
        assert results[0].elapsed_ms >= 0

    @pytest.mark.asyncio
    async def test_results_in_step_order(self, registry, catalog, german, english, french):
        """Should return one result per step in step order."""
        de_en = catalog.dictionary(german, english)
        en_fr = catalog.dictionary(english, french)
        register(registry, "A", [de_en])
        register(registry, "B", [en_fr])
        dispatcher = QueryDispatcher(registry)

        _, results = await dispatcher.query("x", [en_fr, de_en])

        assert [result.step.engine_id for result in results] == ["B", "A"]

    @pytest.mark.asyncio
    async def test_engine_error_isolated(self, registry, catalog, german, english):
        """Should record a failing engine and still return the others."""
        de_en = catalog.dictionary(german, english)
        broken = FakeEngine([de_en])
        broken.search = AsyncMock(side_effect=RuntimeError("backend down"))
        register(registry, "broken", [de_en], engine=broken)
        register(registry, "healthy", [de_en])
        dispatcher = QueryDispatcher(registry)

        _, results = await dispatcher.query("x", [de_en])

        by_engine = {result.step.engine_id: result for result in results}
        assert by_engine["broken"].ok is False
        assert "backend down" in by_engine["broken"].error
        assert by_engine["healthy"].ok is True

    @pytest.mark.asyncio
    async def test_timeout(self, registry, catalog, german, english):
        """Should give up on an engine after the timeout."""
        de_en = catalog.dictionary(german, english)
        register(registry, "slow", [de_en], engine=SlowEngine([de_en]))
        dispatcher = QueryDispatcher(registry, timeout=0.05)

        _, results = await dispatcher.query("x", [de_en])

        assert results[0].ok is False
        assert "Timed out" in results[0].error

    @pytest.mark.asyncio
    async def test_unknown_engine_step(self, registry, german, english):
        """Should report steps naming unregistered engines as failed."""
        dispatcher = QueryDispatcher(registry)
        step = QueryStep("missing", "x", german, english)

        results = await dispatcher.execute([step])

        assert results[0].ok is False
        assert "missing" in results[0].error

    @pytest.mark.asyncio
    async def test_no_steps(self, registry):
        """Should return no results for an empty plan."""
        dispatcher = QueryDispatcher(registry)
        assert await dispatcher.execute([]) == []


class TestStepResult:
    """Tests for StepResult."""

    def test_defaults(self, german, english):
        """Should default to an empty, successful result."""
        result = StepResult(step=QueryStep("E", "x", german, english))
        assert result.entries == []
        assert result.ok is True
