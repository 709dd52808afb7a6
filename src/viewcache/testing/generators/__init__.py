"""Testing generators – Hypothesis strategies for scopes and parameters."""
from viewcache.testing.generators.strategies import (
    entity_id_strategy,
    scope_token_strategy,
    shuffled_scope_strategy,
)

__all__ = ["entity_id_strategy", "scope_token_strategy", "shuffled_scope_strategy"]
