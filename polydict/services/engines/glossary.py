"""JSON-backed glossary engine."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from polydict.models import Dictionary, EntryType, Language
from polydict.services.catalog import LanguageCatalog
from polydict.services.engines.base import (
    DictionaryEntry,
    EngineDescription,
    FeatureSet,
    SearchEngine,
)

logger = logging.getLogger(__name__)

SAMPLE_GLOSSARY_PATH = Path(__file__).resolve().parent.parent.parent / "data" / "glossary.json"


@dataclass
class _Glossary:
    name: str
    dictionaries: list[Dictionary] = field(default_factory=list)
    # (input key, output key) -> list of (source, target, entry type)
    pairs: dict[
        tuple[tuple[str, str | None], tuple[str, str | None]],
        list[tuple[str, str, EntryType]],
    ] = field(default_factory=dict)


class GlossaryEngine(SearchEngine):
    """
    Looks up words in a small glossary file.

    The file is read on first use. Expected layout::

        {
          "name": "Sample glossary",
          "languages": {"de": "german", "en": "english"},
          "dictionaries": [{"query": "de-en", "bidirectional": true}],
          "entries": {"de-en": [["Haus", "house", "noun"], ["gehen", "go"]]}
        }

    The optional third column of an entry is its word class.
    """

    def __init__(
        self,
        catalog: LanguageCatalog,
        path: Path | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        self.catalog = catalog
        self.path = path or SAMPLE_GLOSSARY_PATH
        self._data = data
        self._inline = data is not None
        self._glossary: _Glossary | None = None

    @property
    def glossary(self) -> _Glossary:
        """Get the parsed glossary, loading it if needed."""
        if self._glossary is None:
            if self._data is None:
                logger.info(f"Loading glossary from {self.path}")
                self._data = json.loads(self.path.read_text(encoding="utf-8"))
            self._glossary = self._parse(self._data)
            logger.info(
                f"Glossary '{self._glossary.name}' loaded with "
                f"{len(self._glossary.dictionaries)} dictionaries"
            )
        return self._glossary

    def _parse(self, data: Any) -> _Glossary:
        if not isinstance(data, dict):
            raise ValueError("Glossary must be a JSON object")

        names = data.get("languages", {})
        if not isinstance(names, dict):
            raise ValueError("Glossary 'languages' must be an object")

        glossary = _Glossary(name=str(data.get("name") or "Glossary"))

        dictionaries = data.get("dictionaries", [])
        if not isinstance(dictionaries, list):
            raise ValueError("Glossary 'dictionaries' must be a list")
        for item in dictionaries:
            if not isinstance(item, dict) or "query" not in item:
                raise ValueError(f"Invalid glossary dictionary: {item!r}")
            dictionary = self.catalog.dictionary_for_query_string(
                item["query"], bool(item.get("bidirectional", False)), names
            )
            glossary.dictionaries.append(dictionary)

        entries = data.get("entries", {})
        if not isinstance(entries, dict):
            raise ValueError("Glossary 'entries' must be an object")
        for query_string, rows in entries.items():
            dictionary = self.catalog.dictionary_for_query_string(query_string, False, names)
            key = (dictionary.input.key, dictionary.output.key)
            bucket = glossary.pairs.setdefault(key, [])
            for row in rows:
                if not isinstance(row, (list, tuple)) or len(row) not in (2, 3):
                    raise ValueError(f"Invalid glossary entry in {query_string}: {row!r}")
                entry_type = EntryType.UNKNOWN
                if len(row) == 3:
                    try:
                        entry_type = EntryType(str(row[2]).lower())
                    except ValueError:
                        raise ValueError(
                            f"Invalid entry type in {query_string}: {row[2]!r}"
                        ) from None
                bucket.append((str(row[0]), str(row[1]), entry_type))

        return glossary

    def describe(self) -> EngineDescription:
        return EngineDescription(
            name=self.glossary.name,
            summary="Inline glossary" if self._inline else f"Glossary file {self.path.name}",
            license="MIT",
        )

    def feature_set(self) -> FeatureSet:
        return FeatureSet(supported_dictionaries=list(self.glossary.dictionaries))

    async def search(
        self,
        query: str,
        input_language: Language,
        output_language: Language,
        allow_both_way: bool = False,
    ) -> list[DictionaryEntry]:
        """
        Find glossary pairs whose source contains the query (case-insensitive).

        Pairs stored for the reverse direction are matched on their target side
        as well. With ``allow_both_way`` the reverse direction is searched too.
        """
        needle = query.strip().lower()
        if not needle:
            return []

        results = self._match(needle, input_language, output_language)
        if allow_both_way:
            results.extend(self._match(needle, output_language, input_language))
        return results

    def _match(
        self, needle: str, source: Language, target: Language
    ) -> list[DictionaryEntry]:
        pairs = self.glossary.pairs
        matches: list[DictionaryEntry] = []

        for text, translation, entry_type in pairs.get((source.key, target.key), []):
            if needle in text.lower():
                matches.append(self._entry(text, translation, entry_type, source, target))

        # Pairs stored the other way round
        for translation, text, entry_type in pairs.get((target.key, source.key), []):
            if needle in text.lower():
                matches.append(self._entry(text, translation, entry_type, source, target))

        return matches

    def _entry(
        self,
        text: str,
        translation: str,
        entry_type: EntryType,
        source: Language,
        target: Language,
    ) -> DictionaryEntry:
        return DictionaryEntry(
            input_text=text,
            output_text=translation,
            input_language=source,
            output_language=target,
            source="glossary",
            entry_type=entry_type,
        )
