"""Application cache – stable fingerprints for scopes and key parameters.

Fingerprints are name-based UUIDs (v5) under a fixed namespace, so the same
input maps to the same segment in every process and on every host.
"""
from __future__ import annotations

import json
import uuid
from typing import Any, Mapping

__all__ = ["FINGERPRINT_NAMESPACE", "fingerprint", "fingerprint_params", "normalize_scopes"]

FINGERPRINT_NAMESPACE = uuid.NAMESPACE_URL


def fingerprint(value: str) -> str:
    return str(uuid.uuid5(FINGERPRINT_NAMESPACE, value))


def normalize_scopes(scope: str | None) -> str:
    """Fingerprint a permission-scope string as an unordered token set.

    Tokens are split on any whitespace, sorted and joined with ``,``. The empty
    scope has a fixed fingerprint of its own.
    """
    tokens = sorted((scope or "").split())
    return fingerprint(",".join(tokens))


def fingerprint_params(params: Mapping[str, Any]) -> str:
    # Insertion order of *params* is the policy's declared key order.
    return fingerprint(json.dumps(params, separators=(",", ":"), default=str))
