"""Runnable conceptsync examples. Not part of the core API."""
