"""Composition root: wires the catalog, registry, planner and dispatcher together."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from fastapi import Request

from polydict.config import Settings, settings as default_settings
from polydict.services.catalog import LanguageCatalog
from polydict.services.dispatcher import QueryDispatcher
from polydict.services.engines import GlossaryEngine, SearchEngine
from polydict.services.planner import QueryPlanner
from polydict.services.registry import EngineRegistration, EngineRegistry

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """The objects a running polydict process shares."""

    settings: Settings
    catalog: LanguageCatalog
    registry: EngineRegistry
    planner: QueryPlanner
    dispatcher: QueryDispatcher


def default_engines(settings: Settings, catalog: LanguageCatalog) -> list[SearchEngine]:
    """Construct the engines that ship with polydict, according to settings."""
    engines: list[SearchEngine] = []
    if settings.glossary_enabled:
        engines.append(GlossaryEngine(catalog, path=settings.glossary_path))
    return engines


def register_engines(registry: EngineRegistry, engines: Iterable[SearchEngine]) -> list[str]:
    """
    Register already constructed engines, one call each.

    An engine that cannot describe itself or fails validation is logged and
    skipped; the remaining engines are still registered.

    Returns:
        Ids of the engines that were registered
    """
    logger.info("Registering search engines...")
    registrations: list[EngineRegistration] = []
    for engine in engines:
        try:
            registrations.append(EngineRegistration.from_engine(engine))
        except Exception as e:
            logger.error(f"Engine {type(engine).__name__} could not be described: {e}")
    registered = registry.register_engines(registrations)
    logger.info(f"Registered {len(registered)} of {len(registrations)} engines")
    return registered


def build_container(
    settings: Settings | None = None,
    engines: Iterable[SearchEngine] | None = None,
    catalog: LanguageCatalog | None = None,
) -> Container:
    """
    Build a fully wired container.

    Args:
        settings: Settings to use. Defaults to the module-level settings
        engines: Engines to register. Defaults to default_engines()
        catalog: Catalog to use. Defaults to a fresh one
    """
    settings = settings or default_settings
    if catalog is None:
        catalog = LanguageCatalog()
        if settings.preload_default_languages:
            catalog.load_defaults()

    registry = EngineRegistry(catalog)
    if engines is None:
        engines = default_engines(settings, catalog)
    register_engines(registry, engines)

    planner = QueryPlanner(registry)
    dispatcher = QueryDispatcher(registry, planner, timeout=settings.engine_timeout_seconds)
    return Container(
        settings=settings,
        catalog=catalog,
        registry=registry,
        planner=planner,
        dispatcher=dispatcher,
    )


def get_container(request: Request) -> Container:
    """FastAPI dependency returning the container attached to the application."""
    return request.app.state.container
