"""Shared, frontend-independent helpers (settings)."""
