"""Ambient configuration: logging setup and its settings."""
