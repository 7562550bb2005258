"""Shared helpers: numeric limits, 32-bit float arithmetic, errors and logging."""
