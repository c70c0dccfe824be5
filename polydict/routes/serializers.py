"""Convert core values to JSON-friendly dicts."""

from typing import Any

from polydict.models import Dictionary, Language, QueryRequest, QueryStep
from polydict.services.dispatcher import StepResult
from polydict.services.engines.base import DictionaryEntry, EngineDescription, FeatureSet


def language_to_dict(language: Language) -> dict[str, Any]:
    return {
        "identifier": language.identifier,
        "displayName": language.display_name,
        "dialect": language.dialect,
        "dialectDisplayName": language.dialect_display_name,
    }


def dictionary_to_dict(dictionary: Dictionary) -> dict[str, Any]:
    return {
        "input": language_to_dict(dictionary.input),
        "output": language_to_dict(dictionary.output),
        "bidirectional": dictionary.bidirectional,
        "queryString": dictionary.query_string,
        "queryStringWithDialect": dictionary.query_string_with_dialect,
    }


def engine_to_dict(
    engine_id: str, description: EngineDescription, feature_set: FeatureSet
) -> dict[str, Any]:
    dictionaries = sorted(feature_set.supported_dictionaries or (), key=lambda d: d.key)
    return {
        "id": engine_id,
        "name": description.name,
        "author": description.author,
        "link": description.link,
        "license": description.license,
        "copyright": description.copyright,
        "summary": description.summary,
        "features": {
            "supportsFuzzySearch": feature_set.supports_fuzzy_search,
            "providesAlternatives": feature_set.provides_alternatives,
            "providesExternalContent": feature_set.provides_external_content,
        },
        "dictionaries": [dictionary_to_dict(d) for d in dictionaries],
    }


def step_to_dict(step: QueryStep) -> dict[str, Any]:
    return {
        "engine": step.engine_id,
        "queryString": step.query_string,
        "inputLanguage": step.input_language.code,
        "outputLanguage": step.output_language.code,
        "allowBothWay": step.allow_both_way,
    }


def entry_to_dict(entry: DictionaryEntry) -> dict[str, Any]:
    return {
        "input": entry.input_text,
        "output": entry.output_text,
        "inputLanguage": entry.input_language.code,
        "outputLanguage": entry.output_language.code,
        "source": entry.source,
        "note": entry.note,
        "entryType": entry.entry_type.value,
    }


def request_to_dict(request: QueryRequest) -> dict[str, Any]:
    return {
        "queryString": request.query_string,
        "dictionaries": [d.query_string_with_dialect for d in request.dictionaries],
        "grouping": request.grouping.value,
        "order": request.order.value,
        "steps": [step_to_dict(step) for step in request.steps],
    }


def result_to_dict(result: StepResult) -> dict[str, Any]:
    return {
        "step": step_to_dict(result.step),
        "entries": [entry_to_dict(entry) for entry in result.entries],
        "error": result.error,
        "elapsedMs": round(result.elapsed_ms, 2),
    }
