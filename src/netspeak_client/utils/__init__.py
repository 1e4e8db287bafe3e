"""Shared helpers for error handling and logging."""
