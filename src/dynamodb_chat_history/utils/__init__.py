"""Logging, error and validation helpers."""
