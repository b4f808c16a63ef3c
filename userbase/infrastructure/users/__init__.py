"""Persistence adapters for the users bounded context."""
