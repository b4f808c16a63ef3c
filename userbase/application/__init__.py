"""
Application layer package.

Contains use cases that orchestrate domain logic through ports.
Use cases receive DTOs and return domain entities.
"""
