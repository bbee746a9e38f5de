"""Shared constants for skillcheck."""
