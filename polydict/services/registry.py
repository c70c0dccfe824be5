"""Engine registry mapping dictionaries to the engines that serve them."""

import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace

from polydict.errors import DuplicateEngine, InvalidFeatureSet, UnknownEngine
from polydict.models import Dictionary
from polydict.services.catalog import LanguageCatalog
from polydict.services.engines.base import (
    EngineDescription,
    FeatureSet,
    SearchEngine,
    default_engine_id,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineRegistration:
    """Everything the registry needs to know about one engine."""

    engine_id: str
    description: EngineDescription | None
    feature_set: FeatureSet | None
    engine: SearchEngine | None

    @classmethod
    def from_engine(
        cls, engine: SearchEngine, engine_id: str | None = None
    ) -> "EngineRegistration":
        """Build a registration from an engine's own description and feature set."""
        return cls(
            engine_id=engine_id or default_engine_id(engine),
            description=engine.describe(),
            feature_set=engine.feature_set(),
            engine=engine,
        )


@dataclass(frozen=True)
class _RegisteredEngine:
    engine: SearchEngine
    description: EngineDescription
    feature_set: FeatureSet


@dataclass(frozen=True)
class _Snapshot:
    engines: Mapping[str, _RegisteredEngine] = field(default_factory=dict)
    # dictionary -> {engine id: allows both ways}
    index: Mapping[Dictionary, Mapping[str, bool]] = field(default_factory=dict)


class EngineRegistry:
    """
    Catalog of registered engines and the dictionaries they support.

    Registration is serialized by a lock and publishes a new immutable snapshot,
    so readers never see an engine whose dictionaries are only partly indexed.
    Reads take the current snapshot without locking.
    """

    def __init__(self, catalog: LanguageCatalog) -> None:
        self.catalog = catalog
        self._lock = threading.Lock()
        self._snapshot = _Snapshot()

    def register_engine(self, registration: EngineRegistration) -> None:
        """
        Register an engine and index every dictionary it declares.

        Bidirectional dictionaries are expanded: the engine is also indexed under
        the inverse dictionary and both one-way forms, so it is found whichever
        way a client asks.

        Raises:
            DuplicateEngine: If the engine id is already registered
            InvalidFeatureSet: If description, feature set or any declared
                dictionary is missing or incomplete
        """
        engine_id = registration.engine_id
        registered, dictionaries = self._validate(registration)

        with self._lock:
            current = self._snapshot
            if engine_id in current.engines:
                raise DuplicateEngine(f"Engine {engine_id} is already registered")

            index = {dictionary: dict(engines) for dictionary, engines in current.index.items()}
            for dictionary in dictionaries:
                self._add(index, dictionary, engine_id, dictionary.bidirectional)
                if dictionary.bidirectional:
                    inverse = self.catalog.inverse(dictionary)
                    self._add(index, inverse, engine_id, True)
                    self._add(index, self.catalog.one_way(dictionary), engine_id, True)
                    self._add(index, self.catalog.one_way(inverse), engine_id, True)

            self._snapshot = _Snapshot(
                engines={**current.engines, engine_id: registered},
                index=index,
            )

        logger.info(f"Registered engine {engine_id} with {len(dictionaries)} dictionaries")

    def register_engines(self, registrations: Iterable[EngineRegistration]) -> list[str]:
        """
        Register several engines independently.

        A failing registration is logged and skipped; the others still go through.

        Returns:
            Ids of the engines that were registered
        """
        registered: list[str] = []
        for registration in registrations:
            try:
                self.register_engine(registration)
            except (DuplicateEngine, InvalidFeatureSet) as e:
                logger.error(f"Registering engine {registration.engine_id} failed: {e}")
                continue
            registered.append(registration.engine_id)
        return registered

    @staticmethod
    def _add(
        index: dict[Dictionary, dict[str, bool]],
        dictionary: Dictionary,
        engine_id: str,
        both_ways: bool,
    ) -> None:
        engines = index.setdefault(dictionary, {})
        engines[engine_id] = engines.get(engine_id, False) or both_ways

    @staticmethod
    def _validate(
        registration: EngineRegistration,
    ) -> tuple[_RegisteredEngine, tuple[Dictionary, ...]]:
        name = registration.engine_id
        if not name:
            raise InvalidFeatureSet("Engine id may not be empty")
        if registration.engine is None:
            raise InvalidFeatureSet(f"Engine {name} has no engine instance")
        if registration.description is None:
            raise InvalidFeatureSet(f"Engine {name} returned no description")
        feature_set = registration.feature_set
        if feature_set is None:
            raise InvalidFeatureSet(f"Engine {name} returned no feature set")
        if feature_set.supported_dictionaries is None:
            raise InvalidFeatureSet(f"Feature set of engine {name} has no supported dictionaries")
        dictionaries = tuple(feature_set.supported_dictionaries)
        for dictionary in dictionaries:
            if dictionary is None:
                raise InvalidFeatureSet(f"Dictionary from engine {name} may not be None")
            if not isinstance(dictionary, Dictionary):
                raise InvalidFeatureSet(
                    f"Engine {name} declared {dictionary!r}, which is not a Dictionary"
                )
            if dictionary.input is None:
                raise InvalidFeatureSet(f"Input language in dictionary from engine {name} is None")
            if dictionary.output is None:
                raise InvalidFeatureSet(f"Output language in dictionary from engine {name} is None")
        feature_set = replace(feature_set, supported_dictionaries=dictionaries)
        registered = _RegisteredEngine(registration.engine, registration.description, feature_set)
        return registered, dictionaries

    def _registered(self, engine_id: str) -> _RegisteredEngine:
        registered = self._snapshot.engines.get(engine_id)
        if registered is None:
            raise UnknownEngine(engine_id)
        return registered

    def engine_by_id(self, engine_id: str) -> SearchEngine:
        """
        Raises:
            UnknownEngine: If no engine is registered under this id
        """
        return self._registered(engine_id).engine

    def description_by_id(self, engine_id: str) -> EngineDescription:
        return self._registered(engine_id).description

    def feature_set_by_id(self, engine_id: str) -> FeatureSet:
        return self._registered(engine_id).feature_set

    def registered_engine_ids(self) -> frozenset[str]:
        return frozenset(self._snapshot.engines)

    def count_registered_engines(self) -> int:
        return len(self._snapshot.engines)

    def engines_for(self, dictionary: Dictionary) -> frozenset[str]:
        """Return ids of engines serving a dictionary; empty if none do."""
        return frozenset(self._snapshot.index.get(dictionary, ()))

    def allows_both_ways(self, engine_id: str, dictionary: Dictionary) -> bool:
        """Whether an engine answers both directions of a dictionary in one call."""
        return self._snapshot.index.get(dictionary, {}).get(engine_id, False)

    def supported_dictionaries(self) -> frozenset[Dictionary]:
        """All indexed dictionaries, including the expanded bidirectional forms."""
        return frozenset(self._snapshot.index)
