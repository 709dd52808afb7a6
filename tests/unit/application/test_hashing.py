"""Unit tests for scope normalization and parameter fingerprints."""
from __future__ import annotations

import uuid

import hypothesis.strategies as st
from hypothesis import given

from viewcache.application.cache.hashing import fingerprint, fingerprint_params, normalize_scopes
from viewcache.testing.generators import scope_token_strategy, shuffled_scope_strategy


def _uuid5(value: str) -> str:
    return str(uuid.uuid5(uuid.NAMESPACE_URL, value))


class TestFingerprint:
    def test_is_uuid5_under_url_namespace(self):
        assert fingerprint("abc") == _uuid5("abc")

    def test_deterministic(self):
        assert fingerprint("x") == fingerprint("x")


class TestNormalizeScopes:
    def test_sorted_tokens_are_hashed(self):
        assert normalize_scopes("user/*.* patient/*.*") == _uuid5("patient/*.*,user/*.*")

    def test_order_does_not_matter(self):
        assert normalize_scopes("a b c") == normalize_scopes("c a b")

    def test_extra_whitespace_ignored(self):
        assert normalize_scopes("  a \t\n b  ") == normalize_scopes("a b")

    def test_different_sets_differ(self):
        assert normalize_scopes("patient/*.read") != normalize_scopes("patient/*.write")

    def test_empty_scope_has_fixed_fingerprint(self):
        assert normalize_scopes("") == _uuid5("")
        assert normalize_scopes(None) == normalize_scopes("")
        assert normalize_scopes("   ") == normalize_scopes("")

    def test_duplicate_tokens_are_kept(self):
        # Multisets, not sets: duplicates are part of the fingerprint input.
        assert normalize_scopes("a a") == _uuid5("a,a")

    @given(st.data())
    def test_any_order_and_spacing_normalizes_identically(self, data):
        tokens = data.draw(st.lists(scope_token_strategy(), max_size=8))
        scope = data.draw(shuffled_scope_strategy(tokens))
        assert normalize_scopes(scope) == normalize_scopes(" ".join(tokens))


class TestFingerprintParams:
    def test_compact_json_serialization(self):
        assert fingerprint_params({"_includeSummaryCompositionOnly": True}) == _uuid5(
            '{"_includeSummaryCompositionOnly":true}'
        )

    def test_insertion_order_is_significant(self):
        assert fingerprint_params({"a": 1, "b": 2}) != fingerprint_params({"b": 2, "a": 1})
