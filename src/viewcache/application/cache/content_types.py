"""Application cache – response content types that views may be served as."""
from __future__ import annotations

FHIR_JSON = "application/fhir+json"
FHIR_JSON_LEGACY = "application/json+fhir"
JSON = "application/json"
FHIR_NDJSON = "application/fhir+ndjson"
NDJSON = "application/x-ndjson"
NDJSON_PLAIN = "application/ndjson"

DEFAULT_CONTENT_TYPE = FHIR_JSON

JSON_FAMILY: frozenset[str] = frozenset({FHIR_JSON, FHIR_JSON_LEGACY, JSON})
NDJSON_FAMILY: frozenset[str] = frozenset({FHIR_NDJSON, NDJSON, NDJSON_PLAIN})

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "FHIR_JSON",
    "FHIR_JSON_LEGACY",
    "FHIR_NDJSON",
    "JSON",
    "JSON_FAMILY",
    "NDJSON",
    "NDJSON_FAMILY",
    "NDJSON_PLAIN",
]
