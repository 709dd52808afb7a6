"""Application – cache-key derivation and invalidation use cases."""
