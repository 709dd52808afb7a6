"""Adapters – concrete key-value stores."""
