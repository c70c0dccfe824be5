"""Exceptions raised by the polydict core."""


class PolydictError(Exception):
    """Base class for all polydict errors."""


class InvalidIdentifier(PolydictError, ValueError):
    """A language or dialect identifier is not made of letters only."""


class NullLanguage(PolydictError, ValueError):
    """A dictionary was requested without an input or output language."""


class InvalidDictionaryQuery(PolydictError, ValueError):
    """A dictionary query string does not match lang[_dialect]-lang[_dialect]."""


class DuplicateEngine(PolydictError):
    """An engine id is already registered."""


class InvalidFeatureSet(PolydictError):
    """An engine registration carries an unusable description or feature set."""


class UnknownEngine(PolydictError, LookupError):
    """No engine is registered under the given id."""

    def __init__(self, engine_id: str) -> None:
        super().__init__(f"Unknown search engine: {engine_id}")
        self.engine_id = engine_id


class EmptyQuery(PolydictError, ValueError):
    """A query was planned without a query string."""


class NoDictionaries(PolydictError, ValueError):
    """A query was planned without any dictionaries."""
