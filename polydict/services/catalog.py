"""Interning catalog for Language and Dictionary values."""

import logging
import re
import threading

from polydict.errors import InvalidDictionaryQuery, InvalidIdentifier, NullLanguage
from polydict.models import Dictionary, Language

logger = logging.getLogger(__name__)

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z]+")
DICTIONARY_QUERY_PATTERN = re.compile(r"([A-Za-z]+)(?:_([A-Za-z]+))?-([A-Za-z]+)(?:_([A-Za-z]+))?")

# (identifier, display name, dialect, dialect display name)
DEFAULT_LANGUAGES: tuple[tuple[str, str, str | None, str | None], ...] = (
    ("en", "english", None, None),
    ("de", "german", None, None),
    ("fr", "french", None, None),
    ("es", "spanish", None, None),
    ("it", "italian", None, None),
    ("cn", "chinese", None, None),
    ("ru", "russian", None, None),
    ("no", "norwegian", None, None),
    ("no", "norwegian", "bo", "bokmål"),
    ("no", "norwegian", "ny", "nynorsk"),
)


def is_valid_identifier(identifier: str) -> bool:
    """Check that an identifier consists of at least one letter and nothing else."""
    return IDENTIFIER_PATTERN.fullmatch(identifier) is not None


def parse_query_string(query_string: str) -> tuple[str, str | None, str, str | None]:
    """
    Split a dictionary query string into its language parts.

    Args:
        query_string: A string like "de-en" or "de-no_ny" (case-insensitive)

    Returns:
        Tuple of (input identifier, input dialect, output identifier, output dialect),
        all lowercase, dialects None when absent

    Raises:
        InvalidDictionaryQuery: If the string does not match lang[_dialect]-lang[_dialect]
    """
    match = DICTIONARY_QUERY_PATTERN.fullmatch(query_string or "")
    if match is None:
        raise InvalidDictionaryQuery(f"Illegal dictionary query string: {query_string!r}")
    in_id, in_dialect, out_id, out_dialect = match.groups()
    return (
        in_id.lower(),
        in_dialect.lower() if in_dialect else None,
        out_id.lower(),
        out_dialect.lower() if out_dialect else None,
    )


class LanguageCatalog:
    """
    Process-scoped cache that hands out canonical Language and Dictionary instances.

    The composition root creates one catalog and passes it to everything that
    needs canonical values. Lookups for the same key always return the same
    object; the first display names supplied for a key are kept.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._languages: dict[tuple[str, str | None], Language] = {}
        self._dictionaries: dict[str, Dictionary] = {}

    @classmethod
    def with_defaults(cls) -> "LanguageCatalog":
        """Create a catalog preloaded with the common languages."""
        catalog = cls()
        catalog.load_defaults()
        return catalog

    def load_defaults(self) -> None:
        for identifier, name, dialect, dialect_name in DEFAULT_LANGUAGES:
            self.language(identifier, name, dialect, dialect_name)

    def language(
        self,
        identifier: str,
        display_name: str,
        dialect: str | None = None,
        dialect_display_name: str | None = None,
    ) -> Language:
        """
        Return the canonical language for an identifier and optional dialect.

        Identifiers are case-insensitive. If the language already exists, the
        given display names are ignored.

        Raises:
            InvalidIdentifier: If the identifier or dialect is not letters only
        """
        if identifier is None or not is_valid_identifier(identifier):
            raise InvalidIdentifier(f"Invalid language identifier: {identifier!r}")
        if dialect is not None and not is_valid_identifier(dialect):
            raise InvalidIdentifier(f"Invalid dialect identifier: {dialect!r}")

        key = (identifier.lower(), dialect.lower() if dialect else None)
        with self._lock:
            language = self._languages.get(key)
            if language is None:
                language = Language(
                    identifier=key[0],
                    display_name=display_name if display_name is not None else key[0],
                    dialect=key[1],
                    dialect_display_name=(
                        dialect_display_name if key[1] and dialect_display_name else key[1]
                    ),
                )
                self._languages[key] = language
        return language

    def existing_language(self, identifier: str, dialect: str | None = None) -> Language | None:
        """Return an already created language, or None. Never creates."""
        if not identifier:
            return None
        return self._languages.get((identifier.lower(), dialect.lower() if dialect else None))

    def languages(self) -> list[Language]:
        with self._lock:
            return list(self._languages.values())

    def dictionary(
        self,
        input_language: Language | None,
        output_language: Language | None,
        bidirectional: bool = False,
    ) -> Dictionary:
        """
        Return the canonical dictionary for a language pair.

        Raises:
            NullLanguage: If either language is None
        """
        if input_language is None:
            raise NullLanguage("Input language for dictionary may not be None")
        if output_language is None:
            raise NullLanguage("Output language for dictionary may not be None")

        candidate = Dictionary(input_language, output_language, bool(bidirectional))
        with self._lock:
            return self._dictionaries.setdefault(candidate.key, candidate)

    def dictionary_from_query_string(
        self, query_string: str, bidirectional: bool = False
    ) -> Dictionary | None:
        """
        Find an existing dictionary for a query string like "de-en" or "de-no_ny".

        For bidirectional lookups the reversed pair is tried when the given
        direction is unknown, since a bidirectional dictionary may have been
        created in either direction. Nothing is created here.

        Returns:
            The dictionary, or None if no such dictionary exists

        Raises:
            InvalidDictionaryQuery: If the query string is malformed
        """
        in_id, in_dialect, out_id, out_dialect = parse_query_string(query_string)
        source = in_id + (f"_{in_dialect}" if in_dialect else "")
        target = out_id + (f"_{out_dialect}" if out_dialect else "")

        if not bidirectional:
            return self._dictionaries.get(f"{source}-{target}")

        found = self._dictionaries.get(f"<>{source}-{target}")
        if found is None:
            found = self._dictionaries.get(f"<>{target}-{source}")
            if found is not None:
                logger.debug(f"Dictionary {query_string} found under reversed key {found.key}")
        return found

    def dictionaries_from_query_string(
        self, query_string: str, bidirectional: bool = False
    ) -> list[Dictionary]:
        """Resolve a comma-separated list like "de-en,de-no_ny", skipping unknown entries."""
        found: list[Dictionary] = []
        for part in query_string.split(","):
            part = part.strip()
            if not part:
                continue
            dictionary = self.dictionary_from_query_string(part, bidirectional)
            if dictionary is not None and dictionary not in found:
                found.append(dictionary)
        return found

    def dictionary_for_query_string(
        self,
        query_string: str,
        bidirectional: bool = False,
        display_names: dict[str, str] | None = None,
    ) -> Dictionary:
        """
        Create (or return) the dictionary a query string describes.

        Languages missing from the catalog are created, named from
        ``display_names`` when given, otherwise after their identifier.
        Dialects are named by their full code, e.g. ``"no_ny"``.
        """
        names = display_names or {}
        in_id, in_dialect, out_id, out_dialect = parse_query_string(query_string)
        input_language = self._named_language(names, in_id, in_dialect)
        output_language = self._named_language(names, out_id, out_dialect)
        return self.dictionary(input_language, output_language, bidirectional)

    def _named_language(
        self, names: dict[str, str], identifier: str, dialect: str | None
    ) -> Language:
        display_name = names.get(identifier, identifier)
        if dialect is None:
            return self.language(identifier, display_name)
        dialect_name = names.get(f"{identifier}_{dialect}", dialect)
        return self.language(identifier, display_name, dialect, dialect_name)

    def inverse(self, dictionary: Dictionary) -> Dictionary:
        """Swap the direction of a dictionary; the bidirectional flag is kept."""
        return self.dictionary(dictionary.output, dictionary.input, dictionary.bidirectional)

    def one_way(self, dictionary: Dictionary) -> Dictionary:
        """Return the one-way form of a dictionary in the same direction."""
        return self.dictionary(dictionary.input, dictionary.output, False)
