"""Search engine contract and bundled engines."""

from polydict.services.engines.base import (
    DictionaryEntry,
    EngineDescription,
    FeatureSet,
    SearchEngine,
    default_engine_id,
)
from polydict.services.engines.glossary import GlossaryEngine

__all__ = [
    "DictionaryEntry",
    "EngineDescription",
    "FeatureSet",
    "GlossaryEngine",
    "SearchEngine",
    "default_engine_id",
]
