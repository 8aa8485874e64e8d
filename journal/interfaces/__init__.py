"""Adapters exposing the journal to its clients."""
