"""Shared helpers: typed errors, result values and logging."""
