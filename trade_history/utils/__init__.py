"""Shared helpers: logging, exceptions and env parsing."""
