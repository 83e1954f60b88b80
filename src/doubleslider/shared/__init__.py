"""Shared utilities (cross-cutting, importable from every layer)."""
