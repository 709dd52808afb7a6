"""Kernel – errors, entity identity and store ports shared by every layer."""
