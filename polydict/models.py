"""Value types shared by the catalog, the registry and the planner."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Language:
    """
    A language with an optional dialect.

    Instances are interned by LanguageCatalog. Equality and hashing only look at
    (identifier, dialect); display names are whatever the first caller supplied.
    """

    identifier: str
    display_name: str = field(compare=False)
    dialect: str | None = None
    dialect_display_name: str | None = field(default=None, compare=False)

    @property
    def key(self) -> tuple[str, str | None]:
        return self.identifier, self.dialect

    @property
    def code(self) -> str:
        """Identifier with the dialect appended, e.g. "no_ny"."""
        if self.dialect:
            return f"{self.identifier}_{self.dialect}"
        return self.identifier

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class Dictionary:
    """A directed language pair, optionally searchable in both directions at once."""

    input: Language
    output: Language
    bidirectional: bool = False

    @property
    def query_string(self) -> str:
        """Query string without dialects, e.g. "de-no"."""
        return f"{self.input.identifier}-{self.output.identifier}"

    @property
    def query_string_with_dialect(self) -> str:
        """Query string with dialects, e.g. "de-no_ny"."""
        return f"{self.input.code}-{self.output.code}"

    @property
    def key(self) -> str:
        """Canonical cache key; bidirectional dictionaries carry a "<>" prefix."""
        prefix = "<>" if self.bidirectional else ""
        return prefix + self.query_string_with_dialect

    def __str__(self) -> str:
        return self.key


class EntryType(str, Enum):
    """Word class of a dictionary entry; the entry-type grouping works on this."""

    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    INTERJECTION = "interjection"
    PHRASE = "phrase"
    UNKNOWN = "unknown"


class GroupingType(str, Enum):
    """How the merge stage should group results."""

    NONE = "none"
    DICTIONARIES = "dictionaries"
    ENTRY_TYPE = "entry_type"


class OrderType(str, Enum):
    """How the merge stage should order results."""

    RELEVANCE = "relevance"
    ALPHABETICALLY = "alphabetically"


@dataclass(frozen=True)
class QueryStep:
    """One planned call to one engine in one direction."""

    engine_id: str
    query_string: str
    input_language: Language
    output_language: Language
    allow_both_way: bool = False


@dataclass(frozen=True)
class QueryRequest:
    """A planned query together with the selectors for the merge stage."""

    query_string: str
    dictionaries: tuple[Dictionary, ...]
    grouping: GroupingType
    order: OrderType
    steps: tuple[QueryStep, ...] = ()
