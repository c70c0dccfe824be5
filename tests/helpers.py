"""Shared test doubles."""

from polydict.models import Dictionary, Language
from polydict.services.engines.base import (
    DictionaryEntry,
    EngineDescription,
    FeatureSet,
    SearchEngine,
)
from polydict.services.registry import EngineRegistration, EngineRegistry


class FakeEngine(SearchEngine):
    """Engine returning canned entries for the dictionaries it is given."""

    def __init__(
        self,
        dictionaries: list[Dictionary] | None,
        name: str = "Fake",
        entries: list[DictionaryEntry] | None = None,
    ) -> None:
        self.dictionaries = dictionaries
        self.name = name
        self.entries = entries or []
        self.calls: list[tuple[str, Language, Language, bool]] = []

    def describe(self) -> EngineDescription:
        return EngineDescription(name=self.name, author="Test Author")

    def feature_set(self) -> FeatureSet:
        return FeatureSet(supported_dictionaries=self.dictionaries)

    async def search(
        self,
        query: str,
        input_language: Language,
        output_language: Language,
        allow_both_way: bool = False,
    ) -> list[DictionaryEntry]:
        self.calls.append((query, input_language, output_language, allow_both_way))
        return list(self.entries)


def register(
    registry: EngineRegistry,
    engine_id: str,
    dictionaries: list[Dictionary] | None,
    engine: SearchEngine | None = None,
) -> EngineRegistration:
    """Register a fake engine under an explicit id."""
    engine = engine or FakeEngine(dictionaries, name=engine_id)
    registration = EngineRegistration(
        engine_id=engine_id,
        description=engine.describe(),
        feature_set=FeatureSet(supported_dictionaries=dictionaries),
        engine=engine,
    )
    registry.register_engine(registration)
    return registration
