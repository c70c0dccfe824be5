"""Base classes and dataclasses for search engines."""

from abc import ABC, abstractmethod
from collections.abc import Collection
from dataclasses import dataclass

from polydict.models import Dictionary, EntryType, Language


@dataclass(frozen=True)
class DictionaryEntry:
    """A single match returned by an engine."""

    input_text: str
    output_text: str
    input_language: Language
    output_language: Language
    source: str = ""
    note: str | None = None
    entry_type: EntryType = EntryType.UNKNOWN


@dataclass(frozen=True)
class EngineDescription:
    """Free-form metadata about an engine."""

    name: str
    author: str | None = None
    link: str | None = None
    license: str | None = None
    copyright: str | None = None
    summary: str | None = None


@dataclass(frozen=True)
class FeatureSet:
    """What an engine can do; ``supported_dictionaries`` drives registration."""

    supported_dictionaries: Collection[Dictionary] | None
    supports_fuzzy_search: bool = False
    provides_alternatives: bool = False
    provides_external_content: bool = False


class SearchEngine(ABC):
    """Abstract base class for search engines."""

    @abstractmethod
    def describe(self) -> EngineDescription:
        """Return the description of this engine."""
        ...  # pragma: no cover

    @abstractmethod
    def feature_set(self) -> FeatureSet:
        """Return the features and dictionaries this engine supports."""
        ...  # pragma: no cover

    @abstractmethod
    async def search(
        self,
        query: str,
        input_language: Language,
        output_language: Language,
        allow_both_way: bool = False,
    ) -> list[DictionaryEntry]:
        """
        Search for a query in one direction.

        Args:
            query: The text to look up
            input_language: Language of the query
            output_language: Language of the expected translations
            allow_both_way: If True, the engine may also return matches for the
                reverse direction from this single call

        Returns:
            List of matching entries, possibly empty
        """
        ...  # pragma: no cover


def default_engine_id(engine: object) -> str:
    """Return the fully qualified class name of an engine instance."""
    cls = type(engine)
    return f"{cls.__module__}.{cls.__qualname__}"
