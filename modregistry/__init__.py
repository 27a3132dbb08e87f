"""Identifiers, models, rate limiting and endpoint helpers for a mod registry HTTP API."""

__version__ = "0.1.0"