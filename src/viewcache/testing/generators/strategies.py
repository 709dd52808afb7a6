"""Testing generators – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install "viewcache[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


_SCOPE_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789/*._-"
_WHITESPACE = (" ", "  ", "\t", "\n", " \t ")


def scope_token_strategy() -> "SearchStrategy[str]":
    """Single SMART-style scope token such as ``patient/*.read``."""
    st = _require_hypothesis()
    return st.text(alphabet=_SCOPE_ALPHABET, min_size=1, max_size=24)


def shuffled_scope_strategy(tokens: list[str]) -> "SearchStrategy[str]":
    """Scope strings holding exactly *tokens*, in any order and spacing.

    Example::

        @given(st.data())
        def test_order_free(data):
            tokens = data.draw(st.lists(scope_token_strategy()))
            a = data.draw(shuffled_scope_strategy(tokens))
            assert normalize_scopes(a) == normalize_scopes(" ".join(tokens))
    """
    st = _require_hypothesis()

    def _render(args: tuple[list[str], list[str], str, str]) -> str:
        ordered, gaps, lead, trail = args
        parts = [lead]
        for index, token in enumerate(ordered):
            if index:
                parts.append(gaps[index % len(gaps)])
            parts.append(token)
        parts.append(trail)
        return "".join(parts)

    gap = st.sampled_from(_WHITESPACE)
    edge = st.sampled_from(("",) + _WHITESPACE)
    return st.tuples(
        st.permutations(tokens),
        st.lists(gap, min_size=1, max_size=4),
        edge,
        edge,
    ).map(_render)


def entity_id_strategy() -> "SearchStrategy[str]":
    """FHIR-style logical ids (``[A-Za-z0-9-.]{1,64}``)."""
    st = _require_hypothesis()
    return st.from_regex(r"[A-Za-z0-9\-.]{1,64}", fullmatch=True)


__all__ = ["entity_id_strategy", "scope_token_strategy", "shuffled_scope_strategy"]
