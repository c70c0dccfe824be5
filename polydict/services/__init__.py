"""Core services: canonical values, engine registry, planning and dispatch."""

from polydict.services.catalog import LanguageCatalog
from polydict.services.engines import GlossaryEngine, SearchEngine
from polydict.services.registry import EngineRegistration, EngineRegistry
from polydict.services.planner import QueryPlanner
from polydict.services.dispatcher import QueryDispatcher, StepResult

__all__ = [
    "EngineRegistration",
    "EngineRegistry",
    "GlossaryEngine",
    "LanguageCatalog",
    "QueryDispatcher",
    "QueryPlanner",
    "SearchEngine",
    "StepResult",
]
